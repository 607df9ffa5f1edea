import enum
import shlex
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from .errors import InvalidCommandSyntax, MissingCommand


DEFAULT_PLACEHOLDER = "{}"


class Operator(enum.Enum):
    """Control operator deciding whether the following group runs."""

    SEQUENCE = ";"
    AND = "&&"
    OR = "||"

    @classmethod
    def from_token(cls, token: str) -> Optional["Operator"]:
        try:
            return cls(token)
        except ValueError:
            return None

    def should_run(self, previous_succeeded: bool) -> bool:
        if self is Operator.AND:
            return previous_succeeded
        if self is Operator.OR:
            return not previous_succeeded
        return True


@dataclass(frozen=True)
class CommandGroup:
    argv: Tuple[str, ...]

    @property
    def program(self) -> str:
        return self.argv[0]

    def __str__(self) -> str:
        return shlex.join(self.argv)


@dataclass(frozen=True)
class CommandPlan:
    steps: Tuple[Tuple[Operator, CommandGroup], ...]

    def __iter__(self) -> Iterator[Tuple[Operator, CommandGroup]]:
        return iter(self.steps)

    def __len__(self) -> int:
        return len(self.steps)

    @property
    def groups(self) -> List[CommandGroup]:
        return [group for _, group in self.steps]

    def describe(self) -> str:
        parts: List[str] = []
        for i, (op, group) in enumerate(self.steps):
            if i:
                parts.append(op.value)
            parts.append(str(group))
        return " ".join(parts)


def parse_command_line(
    tokens: Sequence[str],
    target: str,
    placeholder: str = DEFAULT_PLACEHOLDER,
    substitute: bool = True,
) -> CommandPlan:
    """Build a CommandPlan from the trailing command-line tokens.

    Tokens equal to ``placeholder`` become ``target`` unless ``substitute`` is
    off. A command line without operators is a single group.

    Raises MissingCommand for an empty token list and InvalidCommandSyntax for
    a leading, trailing or doubled operator.
    """
    if not tokens:
        raise MissingCommand("no command given")

    steps: List[Tuple[Operator, CommandGroup]] = []
    pending_op = Operator.SEQUENCE
    current: List[str] = []

    for position, token in enumerate(tokens):
        op = Operator.from_token(token)
        if op is None:
            if substitute and token == placeholder:
                token = target
            current.append(token)
            continue

        if not current:
            where = "at start of command" if position == 0 else "after another operator"
            raise InvalidCommandSyntax(f"unexpected {token!r} {where}")
        steps.append((pending_op, CommandGroup(tuple(current))))
        pending_op = op
        current = []

    if not current:
        raise InvalidCommandSyntax(f"command ends with operator {pending_op.value!r}")
    steps.append((pending_op, CommandGroup(tuple(current))))

    return CommandPlan(tuple(steps))
