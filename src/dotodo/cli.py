"""dotodo CLI: start the interactive todo list.

Installed as ``dotodo`` console_script via pip.
"""

from __future__ import annotations

import sys

import click

from dotodo import __version__
from dotodo.config import Config
from dotodo.errors import ConfigError, ParseError, StorageError

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.command(context_settings=CONTEXT_SETTINGS)
@click.option("-v", "--verbose", is_flag=True, help="Show debug output")
@click.version_option(__version__, prog_name="dotodo")
def main(verbose: bool) -> None:
    """dotodo: interactive todo list.

    Tasks are kept in ~/.todo, one per line, and saved after every change.

    \b
    COMMANDS (at the > prompt):
      help                    show help
      list                    list all tasks
      add <title>             add a task
      edit <id> <title>       rename a task
      complete <id>           mark a task done
      incomplete <id>         mark a task not done
      remove <id>             delete a task
      save                    write pending changes
      quit                    exit
    """
    from dotodo import log as dlog
    from dotodo.repl import run_loop
    from dotodo.tasks.io import TaskStorage
    from dotodo.todo_list import TodoList

    try:
        cfg = Config.from_env(verbose=verbose)
    except ConfigError as exc:
        dlog.error(str(exc))
        sys.exit(1)
    dlog.set_verbose(cfg.verbose)
    dlog.debug(f"Storage file: {cfg.storage_path}")

    todos = TodoList(TaskStorage(cfg.storage_path))
    try:
        todos.load()
    except ParseError as exc:
        dlog.error(f"Corrupt todo file {cfg.storage_path}: {exc}")
        sys.exit(1)
    except StorageError as exc:
        dlog.error(str(exc))
        sys.exit(1)

    sys.exit(run_loop(todos))
