import logging
import subprocess
from typing import Callable, Optional

from .commands import CommandGroup, CommandPlan
from .errors import CommandExecutionFailure


def spawn(group: CommandGroup) -> int:
    """Run one group to completion with inherited stdio and return its exit code."""
    try:
        completed = subprocess.run(list(group.argv))
    except OSError as e:
        raise CommandExecutionFailure(group.argv, e) from e
    return completed.returncode


def run_group(group: CommandGroup) -> bool:
    logging.info(f"Running: {group}")
    try:
        code = spawn(group)
    except CommandExecutionFailure as e:
        logging.warning(f"Error: {e}")
        return False

    if code != 0:
        logging.warning(f"Command exited with status {code}: {group}")
        return False
    return True


def run_plan(
    plan: CommandPlan, runner: Callable[[CommandGroup], bool] = run_group
) -> Optional[bool]:
    """Execute the groups of ``plan`` in order, honouring ``;``, ``&&`` and ``||``.

    The decision for each step compares against the most recently executed
    group; skipped groups leave that result untouched. Returns the result of
    the last group that ran, or None for an empty plan.
    """
    last: Optional[bool] = None
    for op, group in plan:
        if last is not None and not op.should_run(last):
            logging.debug(f"Skipping ({op.value}): {group}")
            continue
        last = runner(group)
    return last
