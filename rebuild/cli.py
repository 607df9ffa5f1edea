import logging
from pathlib import Path
from typing import List, Optional

import typer

from .commands import DEFAULT_PLACEHOLDER, parse_command_line
from .errors import RebuildError
from .loop import watch
from .utils import resolve_target


app = typer.Typer(add_completion=False, no_args_is_help=True)

END_OF_OPTIONS = "--"


@app.command(context_settings={"allow_interspersed_args": False})
def main(
    filename: Path = typer.Argument(..., help="File to watch"),
    command: Optional[List[str]] = typer.Argument(
        None,
        help="Command to run when the file changes; separate commands with ';', '&&' or '||'",
        show_default=False,
    ),
    verbatim: bool = typer.Option(
        False, "--verbatim", help="Don't replace the placeholder with the filename"
    ),
    placeholder: str = typer.Option(
        DEFAULT_PLACEHOLDER,
        "--placeholder",
        help="Argument that is replaced with the watched filename",
    ),
    once: bool = typer.Option(
        False, "--once", help="Exit after the first change has been handled"
    ),
    use_polling: Optional[bool] = typer.Option(
        None, "--poll/--no-poll", help="Force polling observer (auto if under /mnt)"
    ),
    loglevel: str = typer.Option(
        "INFO", "--loglevel", help="Logging level: DEBUG, INFO, WARNING, ERROR"
    ),
):
    """Run a command every time FILENAME is modified.

    - rebuild foo.py python {}
    - rebuild foo.c -- gcc -o foo {} '&&' ./foo

    Options go before FILENAME; everything after it belongs to the command.
    """
    logging.basicConfig(
        level=getattr(logging, loglevel.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    tokens = list(command or [])
    if tokens and tokens[0] == END_OF_OPTIONS:
        tokens = tokens[1:]

    try:
        plan = parse_command_line(
            tokens,
            str(filename),
            placeholder=placeholder,
            substitute=not verbatim,
        )
        target = resolve_target(filename)
        if use_polling is None:
            use_polling = str(target).startswith("/mnt/")
        logging.debug(f"Plan: {plan.describe()}")
        watch(target, plan, use_polling=use_polling, once=once)
    except RebuildError as e:
        logging.error(f"{type(e).__name__}: {e}")
        raise typer.Exit(code=1)
    except KeyboardInterrupt:
        logging.info("Stopping watcher...")
        raise typer.Exit(code=130)


if __name__ == "__main__":
    app()
