"""Tests for dotodo.commands: matching order, argument parsing, dispatch."""

from __future__ import annotations

from pathlib import Path

import pytest

from dotodo.commands import (
    EMPTY_MESSAGE,
    HELP_TEXT,
    Command,
    CommandKind,
    dispatch,
    parse_command,
)
from dotodo.errors import InvalidCommand, ParseError
from dotodo.io_utils import read_text


# ── parse_command ───────────────────────────────────────────────────────


class TestParseCommand:
    @pytest.mark.parametrize(
        "line, expected",
        [
            ("help", Command(CommandKind.HELP)),
            ("  list  ", Command(CommandKind.LIST)),
            ("add buy milk", Command(CommandKind.ADD, title="buy milk")),
            ("add    padded   ", Command(CommandKind.ADD, title="padded")),
            ("edit 3 new title", Command(CommandKind.EDIT, task_id=3, title="new title")),
            ("complete 2", Command(CommandKind.COMPLETE, task_id=2)),
            ("incomplete 2", Command(CommandKind.INCOMPLETE, task_id=2)),
            ("remove 10", Command(CommandKind.REMOVE, task_id=10)),
            ("save", Command(CommandKind.SAVE)),
            ("quit", Command(CommandKind.QUIT)),
        ],
    )
    def test_recognized(self, line, expected):
        assert parse_command(line) == expected

    def test_incomplete_is_not_complete(self):
        """'incomplete 1' must not be read as the complete command."""
        assert parse_command("incomplete 1").kind is CommandKind.INCOMPLETE

    def test_save_and_quit_match_by_prefix(self):
        assert parse_command("saved").kind is CommandKind.SAVE
        assert parse_command("quit now").kind is CommandKind.QUIT

    def test_help_and_list_are_exact(self):
        with pytest.raises(InvalidCommand):
            parse_command("help me")
        with pytest.raises(InvalidCommand):
            parse_command("listing")

    @pytest.mark.parametrize("line", ["", "add", "frobnicate", "ADD x", "complete"])
    def test_unrecognized(self, line):
        with pytest.raises(InvalidCommand):
            parse_command(line)

    @pytest.mark.parametrize(
        "line",
        ["complete abc", "remove -1", "incomplete 1.5", "edit x title", "edit 1", "add a [X] b"],
    )
    def test_bad_arguments(self, line):
        with pytest.raises(ParseError):
            parse_command(line)

    def test_invalid_command_is_a_parse_error(self):
        assert issubclass(InvalidCommand, ParseError)


# ── dispatch ────────────────────────────────────────────────────────────


class TestDispatch:
    def test_help(self, todo_list):
        outcome = dispatch(todo_list(), Command(CommandKind.HELP))
        assert outcome.output == HELP_TEXT
        for word in ("list", "add", "edit", "complete", "incomplete", "remove", "save", "quit"):
            assert word in HELP_TEXT

    def test_list_empty(self, todo_list):
        outcome = dispatch(todo_list(), Command(CommandKind.LIST))
        assert outcome.output == EMPTY_MESSAGE

    def test_scenario(self, todo_list):
        todos = todo_list()
        for line in ["add buy milk", "add walk dog", "complete 1"]:
            outcome = dispatch(todos, parse_command(line))
            assert outcome.warning is None
        outcome = dispatch(todos, parse_command("list"))
        assert outcome.output == "1. [X] buy milk\n2. [ ] walk dog"

    def test_missing_id_warns(self, todo_list, make_task):
        todos = todo_list([make_task(1)])
        outcome = dispatch(todos, Command(CommandKind.REMOVE, task_id=5))
        assert outcome.warning == "No task with id 5."
        assert len(todos) == 1

    def test_edit_and_incomplete(self, todo_list, make_task):
        todos = todo_list([make_task(1, "old", complete=True)])
        dispatch(todos, parse_command("edit 1 brand new title"))
        dispatch(todos, parse_command("incomplete 1"))
        assert todos.render() == "1. [ ] brand new title"

    def test_save_is_idempotent(self, todo_list, todo_file: Path):
        todos = todo_list()
        dispatch(todos, parse_command("add a"))
        outcome = dispatch(todos, Command(CommandKind.SAVE))
        assert outcome.notice == "Nothing to save."
        assert read_text(todo_file) == "1. [ ] a"

    def test_save_flushes_pending_changes(self, todo_list, make_task, todo_file: Path):
        todos = todo_list([make_task(1, "loaded")])
        todos._dirty = True
        outcome = dispatch(todos, Command(CommandKind.SAVE))
        assert outcome.notice == "Saved 1 task(s)."
        assert read_text(todo_file) == "1. [ ] loaded"

    def test_quit(self, todo_list):
        assert dispatch(todo_list(), Command(CommandKind.QUIT)).quit is True
