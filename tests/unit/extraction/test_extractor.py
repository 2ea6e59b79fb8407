"""Tests for the LiteralExtractor workflow."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from arb_extractor.core.exceptions import EntryValidationError
from arb_extractor.extraction.extractor import LiteralExtractor
from arb_extractor.extraction.models import ExtractionEntry, SourceLiteral
from arb_extractor.formatting.placeholders import ConversionResult
from arb_extractor.resources.file_set import ResourceFileSet
from arb_extractor.resources.resource_file import ResourceFile
from arb_extractor.resources.synchronizer import ResourceSynchronizer
from tests.utils.test_helpers import ArbFactory, read_arb_file


class TestExtract:
    """Test single literal extraction."""

    def test_uses_suggested_key(
        self,
        en_zh_files: tuple[ResourceFile, ResourceFile],
        file_set_factory: Callable[..., ResourceFileSet],
    ) -> None:
        """Test extracting a simple word with the suggested key."""
        en, zh = en_zh_files
        seen: list[ConversionResult] = []

        def accept_suggestion(result: ConversionResult) -> str:
            seen.append(result)
            return result.suggested_key

        outcome = LiteralExtractor().extract(
            SourceLiteral("'Cancel'", 10, 18), file_set_factory(en, zh), accept_suggestion
        )

        assert seen == [ConversionResult(value="Cancel", suggested_key="cancel")]
        assert outcome is not None
        assert outcome.key == "cancel"
        assert outcome.files_written == 2
        assert outcome.replacement == "S.of(context).cancel"
        assert read_arb_file(zh.path) == {"cancel": "Cancel"}

    def test_writes_converted_value(
        self, arb_factory: ArbFactory, file_set_factory: Callable[..., ResourceFileSet]
    ) -> None:
        """Test that placeholders are stored in the ARB value."""
        en = arb_factory("app_en.arb", {})

        outcome = LiteralExtractor().extract(
            SourceLiteral('"Hi ${user.name}"', 0, 17),
            file_set_factory(en, class_name="L10n"),
            lambda result: "  greeting ",
        )

        assert outcome is not None
        assert outcome.value == "Hi {name}"
        assert outcome.replacement == "L10n.of(context).greeting"
        assert read_arb_file(en.path) == {"greeting": "Hi {name}"}

    @pytest.mark.parametrize("answer", [None, "", "   "])
    def test_blank_key_cancels(
        self,
        answer: str | None,
        arb_factory: ArbFactory,
        file_set_factory: Callable[..., ResourceFileSet],
    ) -> None:
        """Test that cancelling the key prompt writes nothing."""
        en = arb_factory("app_en.arb", {})
        before = en.path.read_bytes()

        outcome = LiteralExtractor().extract(
            SourceLiteral("'OK'", 0, 4), file_set_factory(en), lambda result: answer
        )

        assert outcome is None
        assert en.path.read_bytes() == before

    def test_empty_file_set_gives_no_replacement(self) -> None:
        """Test that an unresolved configuration writes nothing."""
        outcome = LiteralExtractor().extract(
            SourceLiteral("'OK'", 0, 4), ResourceFileSet(files=()), lambda result: "ok"
        )

        assert outcome is not None
        assert outcome.files_written == 0
        assert outcome.replacement is None

    def test_failed_write_gives_no_replacement(
        self, tmp_path: Path, file_set_factory: Callable[..., ResourceFileSet]
    ) -> None:
        """Test that the source must not change when nothing was written."""
        blocker = tmp_path / "blocked"
        _ = blocker.write_text("", encoding="utf-8")

        outcome = LiteralExtractor().extract(
            SourceLiteral("'OK'", 0, 4),
            file_set_factory(ResourceFile(blocker / "app_en.arb")),
            lambda result: "ok",
        )

        assert outcome is not None
        assert outcome.files_written == 0
        assert outcome.replacement is None

    def test_declined_overwrite_reuses_existing_key(
        self, arb_factory: ArbFactory, file_set_factory: Callable[..., ResourceFileSet]
    ) -> None:
        """Test that keeping an existing key still yields a replacement."""
        en = arb_factory("app_en.arb", {"hello": "Hi"})
        extractor = LiteralExtractor(confirm_overwrite=lambda key: False)

        outcome = extractor.extract(
            SourceLiteral("'Hello'", 0, 7), file_set_factory(en), lambda result: "hello"
        )

        assert outcome is not None
        assert outcome.files_written == 1
        assert outcome.replacement == "S.of(context).hello"
        assert read_arb_file(en.path) == {"hello": "Hi"}

    def test_selection_is_not_stripped(
        self, arb_factory: ArbFactory, file_set_factory: Callable[..., ResourceFileSet]
    ) -> None:
        """Test that selected text is converted as-is."""
        en = arb_factory("app_en.arb", {})

        outcome = LiteralExtractor().extract(
            SourceLiteral.from_selection("Welcome $user", 5, 18),
            file_set_factory(en),
            lambda result: "welcome",
        )

        assert outcome is not None
        assert read_arb_file(en.path) == {"welcome": "Welcome {user}"}

    def test_custom_synchronizer_is_used(
        self, arb_factory: ArbFactory, file_set_factory: Callable[..., ResourceFileSet]
    ) -> None:
        """Test injecting a synchronizer."""
        en = arb_factory("app_en.arb", {})
        synchronizer = MagicMock(spec=ResourceSynchronizer)
        synchronizer.write.return_value = 1

        outcome = LiteralExtractor(synchronizer=synchronizer).extract(
            SourceLiteral("'OK'", 0, 4), file_set_factory(en), lambda result: "ok"
        )

        synchronizer.write.assert_called_once_with((en,), "ok", "OK")
        assert outcome is not None
        assert outcome.replacement == "S.of(context).ok"


class TestCommitBatch:
    """Test batch commits."""

    def test_commit_is_additive(
        self, arb_factory: ArbFactory, file_set_factory: Callable[..., ResourceFileSet]
    ) -> None:
        """Test that a batch adds new keys only."""
        en = arb_factory("app_en.arb", {"cancel": "Cancel"})
        zh = arb_factory("app_zh.arb", {})
        entries = [
            ExtractionEntry("'Cancel!!'", "cancel", "Cancel!!", SourceLiteral("'Cancel!!'", 0, 10)),
            ExtractionEntry("'OK'", " ok", "OK", SourceLiteral("'OK'", 12, 16)),
        ]

        count = LiteralExtractor().commit_batch(entries, file_set_factory(en, zh))

        assert count == 2
        assert read_arb_file(en.path) == {"cancel": "Cancel", "ok": "OK"}
        assert read_arb_file(zh.path) == {"cancel": "Cancel!!", "ok": "OK"}

    def test_commit_rejects_blank_keys(
        self, arb_factory: ArbFactory, file_set_factory: Callable[..., ResourceFileSet]
    ) -> None:
        """Test that nothing is written while a key is missing."""
        en = arb_factory("app_en.arb", {})
        before = en.path.read_bytes()
        entries = [ExtractionEntry("'OK'", "", "OK", SourceLiteral("'OK'", 0, 4))]

        with pytest.raises(EntryValidationError):
            _ = LiteralExtractor().commit_batch(entries, file_set_factory(en))

        assert en.path.read_bytes() == before

    def test_commit_without_targets(self) -> None:
        """Test that an empty file set writes nothing."""
        entries = [ExtractionEntry("'OK'", "ok", "OK", SourceLiteral("'OK'", 0, 4))]

        assert LiteralExtractor().commit_batch(entries, ResourceFileSet(files=())) == 0
