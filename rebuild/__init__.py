"""rebuild: run a command line every time a file is modified.

Exports:
- app, main: Typer CLI entrypoints (from rebuild.cli)
- parse_command_line, CommandPlan, CommandGroup, Operator: command tokenizer (from rebuild.commands)
- run_group, run_plan: command runner and sequencer (from rebuild.runner)
- watch: file watcher loop (from rebuild.loop)
- TargetFileHandler: watchdog event handler (from rebuild.handlers)
"""

from .cli import app, main  # noqa: F401
from .commands import CommandGroup, CommandPlan, Operator, parse_command_line  # noqa: F401
from .errors import (  # noqa: F401
    CommandExecutionFailure,
    InvalidCommandSyntax,
    MissingCommand,
    RebuildError,
    WatchSetupError,
)
from .handlers import TargetFileHandler  # noqa: F401
from .loop import watch  # noqa: F401
from .runner import run_group, run_plan  # noqa: F401

__all__ = [
    "app",
    "main",
    "CommandGroup",
    "CommandPlan",
    "Operator",
    "parse_command_line",
    "RebuildError",
    "MissingCommand",
    "InvalidCommandSyntax",
    "WatchSetupError",
    "CommandExecutionFailure",
    "TargetFileHandler",
    "watch",
    "run_group",
    "run_plan",
]
