import functools
import logging
import sys

from rich.markup import escape

from ropm.utils.output import console

LOG_FORMAT = "%(levelname)s: %(message)s"


class RopmError(Exception):
    """Base class for errors raised by ropm itself."""


class InvalidInput(RopmError):
    """Missing arguments, unknown command or an unrecognised choice."""


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


def handle_errors(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except SystemExit:
            raise
        except InvalidInput as e:
            console.print(f"[red]{escape(str(e))}[/red]")
            sys.exit(1)
        except KeyboardInterrupt:
            console.print("\n[yellow]Interrupted[/yellow]")
            sys.exit(130)
        except Exception as e:
            logging.error(f"{func.__name__} ▶ {e}")
            console.print(f"[!] {func.__name__} failed: {e}", markup=False)
            sys.exit(1)

    return wrapper
