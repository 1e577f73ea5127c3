"""
tests/test_cli.py

notesledger CLI against markdown files.
"""

import json
import logging

import pytest
from click.testing import CliRunner

from notesledger.cli import cli
from notesledger.editor.file import FileDocumentEditor
from notesledger.utils.logging_utils import LOGGER_NAME

BASE = ["--log-level", "ERROR"]


@pytest.fixture(autouse=True)
def reset_logger():
    """The CLI binds a handler to the runner's stderr; drop it after each test."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def doc(tmp_path):
    path = tmp_path / "ISSUE.md"
    path.write_text("# Crash on start\n\nRepro steps here.\n", encoding="utf-8")
    return path


def invoke(runner, *args):
    return runner.invoke(cli, BASE + list(args))


def add(runner, doc, title, author="alice", url="https://x/1"):
    return invoke(runner, "add", str(doc), title, "--author", author, "--comment-url", url)


class TestAddRemove:

    def test_add_then_show(self, runner, doc):
        result = add(runner, doc, "fix-typo")
        assert result.exit_code == 0, result.output
        assert "Added note 'fix-typo'" in result.output

        shown = invoke(runner, "show", str(doc))
        assert shown.exit_code == 0
        assert shown.output.startswith("### Summary Notes")
        assert '- ["fix-typo" by @alice](https://x/1)' in shown.output

    def test_show_json(self, runner, doc):
        add(runner, doc, "a")
        add(runner, doc, "b", author="bob", url="https://x/2")

        result = invoke(runner, "show", str(doc), "--format", "json")

        assert result.exit_code == 0
        assert json.loads(result.output) == {"entries": [
            {"title": "a", "comment_url": "https://x/1", "author": "alice"},
            {"title": "b", "comment_url": "https://x/2", "author": "bob"},
        ]}

    def test_show_empty(self, runner, doc):
        result = invoke(runner, "show", str(doc))
        assert result.exit_code == 0
        assert "(no notes)" in result.output

    def test_remove(self, runner, doc):
        add(runner, doc, "a")
        result = invoke(runner, "remove", str(doc), "a", "--author", "alice", "--comment-url", "https://x/2")

        assert result.exit_code == 0, result.output
        snapshot = FileDocumentEditor().load_current(str(doc), "SUMMARY")
        assert len(snapshot.ledger) == 0

    def test_remove_missing_is_rejected(self, runner, doc):
        before = doc.read_text(encoding="utf-8")
        result = invoke(runner, "remove", str(doc), "nope", "--author", "alice", "--comment-url", "https://x/2")

        assert result.exit_code == 1
        assert "No note titled 'nope'" in result.output
        assert doc.read_text(encoding="utf-8") == before

    def test_missing_author_is_error(self, runner, doc):
        result = invoke(runner, "add", str(doc), "a", "--comment-url", "https://x/1")
        assert result.exit_code == 2
        assert "author" in result.output

    def test_missing_document_is_error(self, runner, tmp_path):
        result = add(runner, tmp_path / "missing.md", "a")
        assert result.exit_code == 2
        assert "Document not found" in result.output


class TestComment:

    def test_comment_body(self, runner, doc):
        result = invoke(
            runner, "comment", str(doc),
            "--body", "Looks good.\n@notesbot note root-cause",
            "--author", "carol", "--comment-url", "https://x/3",
        )
        assert result.exit_code == 0, result.output
        ledger = FileDocumentEditor().load_current(str(doc), "SUMMARY").ledger
        assert ledger.titles() == ["root-cause"]
        assert ledger.entries[0].author == "carol"

    def test_comment_body_file(self, runner, doc, tmp_path):
        add(runner, doc, "old")
        body = tmp_path / "comment.txt"
        body.write_text("@notesbot note remove old\n", encoding="utf-8")

        result = invoke(
            runner, "comment", str(doc), "--body-file", str(body),
            "--author", "alice", "--comment-url", "https://x/4",
        )

        assert result.exit_code == 0, result.output
        assert FileDocumentEditor().load_current(str(doc), "SUMMARY").ledger.titles() == []

    def test_comment_without_command(self, runner, doc):
        result = invoke(
            runner, "comment", str(doc), "--body", "no command here",
            "--author", "alice", "--comment-url", "https://x/5",
        )
        assert result.exit_code == 1
        assert "No @notesbot note command" in result.output

    def test_comment_needs_exactly_one_body(self, runner, doc):
        result = invoke(runner, "comment", str(doc), "--author", "a", "--comment-url", "u")
        assert result.exit_code == 2


class TestConfigOption:

    def test_custom_bot_and_marker(self, runner, doc, tmp_path):
        config = tmp_path / "notesledger.yaml"
        config.write_text(
            "bot_name: helper\nmarker_name: NOTES\ngenerator: helper-bot\n",
            encoding="utf-8",
        )

        result = runner.invoke(cli, BASE + [
            "--config", str(config), "comment", str(doc),
            "--body", "@helper note decided",
            "--author", "dave", "--comment-url", "https://x/6",
        ])

        assert result.exit_code == 0, result.output
        text = doc.read_text(encoding="utf-8")
        assert "<!-- NOTESLEDGER_NOTES_START -->" in text
        assert "Generated by helper-bot" in text

    def test_bad_config(self, runner, doc, tmp_path):
        config = tmp_path / "bad.yaml"
        config.write_text("max_retries: -2\n", encoding="utf-8")

        result = runner.invoke(cli, BASE + ["--config", str(config), "show", str(doc)])

        assert result.exit_code == 2

    def test_unknown_log_level_in_config(self, runner, doc, tmp_path):
        config = tmp_path / "loud.yaml"
        config.write_text("log_level: LOUD\n", encoding="utf-8")

        result = runner.invoke(cli, ["--config", str(config), "show", str(doc)])

        assert result.exit_code == 2
        assert "log_level" in result.output
