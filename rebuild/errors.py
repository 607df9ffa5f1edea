from typing import Sequence


class RebuildError(Exception):
    """Base class for errors reported by rebuild."""


class MissingCommand(RebuildError):
    pass


class InvalidCommandSyntax(RebuildError):
    pass


class WatchSetupError(RebuildError):
    pass


class CommandExecutionFailure(RebuildError):
    """A command could not be spawned at all (not found, not executable)."""

    def __init__(self, argv: Sequence[str], cause: OSError) -> None:
        super().__init__(f"failed to execute {argv[0]!r}: {cause.strerror or cause}")
        self.argv = argv
        self.cause = cause
