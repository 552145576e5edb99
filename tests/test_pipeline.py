"""Tests for commitsmith.pipeline module."""

import pytest

from commitsmith.exceptions import MessageFileError
from commitsmith.pipeline import (
    HookResult,
    clean_message,
    process_message,
    read_message_file,
    rewrite_message,
    run_hook,
    write_message_file,
)
from commitsmith.policy import PolicyConfig
from commitsmith.validator import FailureKind


class TestProcessMessage:
    """Tests for process_message function."""

    @pytest.mark.parametrize(
        "message, expected",
        [
            ("Added helper.rb", "Added `helper.rb`"),
            ("Fixed `src/lib/parse.rb` bug", "Fixed `parse.rb` bug"),
            ("Updated dir1\\ dir2\\ file.rb", "Updated `file.rb`"),
            ("Refactored self usage in module", "Refactored `self` usage in `module`"),
            ("Added class.rb", "Added `class.rb`"),
        ],
    )
    def test_accepted_messages_are_rewritten(self, message, expected):
        """Test end-to-end rewriting of accepted messages."""
        result = process_message(message)

        assert result.ok
        assert result.failure is None
        assert result.message == expected

    @pytest.mark.parametrize(
        "message, expected",
        [
            ("Updated/x.rb", "Updated `x.rb`"),
            ("Fixed\\ foo", "Fixed foo"),
            ("Fixed: crash in parser.rb", "Fixed: crash in `parser.rb`"),
            ("Fixed", "Fixed"),
        ],
    )
    def test_leading_verb_survives_rewrite(self, message, expected):
        """Test that the accepted verb is never rewritten away."""
        result = process_message(message)

        assert result.message == expected
        assert process_message(result.message).message == expected

    def test_verb_configured_as_keyword_is_not_quoted(self):
        """Test that the leading verb stays bare even if it is a keyword."""
        config = PolicyConfig(extra_keywords=["Added"])
        assert process_message("Added Added", config).message == "Added `Added`"

    def test_lowercase_verb_rejected(self):
        """Test that a lowercase verb fails without a rewrite."""
        result = process_message("fixed bug")

        assert not result.ok
        assert result.failure.kind == FailureKind.MISSING_LEADING_VERB
        assert result.message is None

    def test_non_english_rejected(self):
        """Test that non-English text fails before punctuation checks."""
        result = process_message("Added naïve parser!")
        assert result.failure.kind == FailureKind.NON_ENGLISH_CHARACTERS

    def test_custom_policy(self):
        """Test that configured verbs and keywords are applied."""
        config = PolicyConfig(verbs=["Reworked"], extra_keywords=["lambda"])

        assert process_message("Reworked lambda", config).message == "Reworked `lambda`"
        assert process_message("Added lambda", config).failure.kind == FailureKind.MISSING_LEADING_VERB
        assert process_message("Reworked lambda").failure.kind == FailureKind.MISSING_LEADING_VERB

    def test_trace_receives_every_stage(self):
        """Test that the trace callback sees each stage in order."""
        seen = []
        process_message("Added helper.rb", trace=lambda name, text: seen.append(name))

        assert seen == [
            "unwrap_quoted",
            "drop_continued_tokens",
            "collapse_windows_path",
            "quote_filenames",
            "quote_keywords",
        ]


class TestRewriteMessage:
    """Tests for rewrite_message function."""

    @pytest.mark.parametrize(
        "message",
        [
            "Added helper.rb",
            "Fixed `src/lib/parse.rb` bug",
            "Refactored self usage in module",
            "Added class.rb and then removed it",
            "Fixed a\\b c\\d",
            "Fixed a\\b c\\self",
            "Changed lib\\util\\x.rb and docs/a.md",
        ],
    )
    def test_idempotent(self, message):
        """Test that rewriting an already rewritten message changes nothing."""
        once = rewrite_message(message)
        assert rewrite_message(once) == once


class TestHookResult:
    """Tests for HookResult."""

    def test_ok_without_failure(self):
        """Test that a result without failure is ok."""
        assert HookResult(original="Added x", message="Added x").ok


class TestMessageFile:
    """Tests for message file I/O."""

    def test_clean_message_drops_comments(self, sample_editor_message):
        """Test that git comment lines are removed."""
        assert clean_message(sample_editor_message) == "Added helper.rb"

    def test_clean_message_drops_verbose_diff(self, sample_verbose_message):
        """Test that the diff below the scissors line is removed."""
        assert clean_message(sample_verbose_message) == "Added helper.rb"

    def test_verbose_commit_is_accepted(self, message_file, sample_verbose_message):
        """Test that a verbose commit message file passes and is rewritten."""
        path = message_file(sample_verbose_message)

        result = run_hook(path)

        assert result.ok
        assert path.read_text(encoding="utf-8") == "Added `helper.rb`\n"

    def test_read_missing_file_raises(self, temp_dir):
        """Test that a missing message file raises MessageFileError."""
        with pytest.raises(MessageFileError) as exc_info:
            read_message_file(temp_dir / "missing")
        assert "not found" in str(exc_info.value)

    def test_read_strips_trailing_newline(self, message_file):
        """Test that the trailing newline git writes is removed."""
        assert read_message_file(message_file("Fixed bug\n")) == "Fixed bug"

    def test_write_adds_trailing_newline(self, temp_dir):
        """Test that the written file ends with a single newline."""
        path = temp_dir / "MSG"
        write_message_file(path, "Added `x.rb`")
        assert path.read_text(encoding="utf-8") == "Added `x.rb`\n"


class TestRunHook:
    """Tests for run_hook function."""

    def test_rewrites_file_on_success(self, message_file, sample_editor_message):
        """Test that an accepted message is written back rewritten."""
        path = message_file(sample_editor_message)

        result = run_hook(path)

        assert result.ok
        assert path.read_text(encoding="utf-8") == "Added `helper.rb`\n"

    def test_leaves_file_untouched_on_failure(self, message_file):
        """Test that a rejected message file keeps its exact content."""
        content = "fixed bug\n# comment\n"
        path = message_file(content)

        result = run_hook(path)

        assert result.failure.kind == FailureKind.MISSING_LEADING_VERB
        assert path.read_text(encoding="utf-8") == content

    def test_missing_file(self, temp_dir):
        """Test that a missing file raises MessageFileError."""
        with pytest.raises(MessageFileError):
            run_hook(temp_dir / "COMMIT_EDITMSG")
