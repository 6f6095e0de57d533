# ropm/pkgmanager.py

import logging

from rich.markup import escape

from ropm.backends import BACKENDS, default, flatpak
from ropm.models import Backend, OperationResult, Outcome
from ropm.normalize import normalize, render_record
from ropm.prompts import Prompts
from ropm.utils.errors import InvalidInput, handle_errors
from ropm.utils.output import console

logger = logging.getLogger("ropm")

STYLES = {
    Outcome.SUCCESS: "green",
    Outcome.CANCELLED: "yellow",
    Outcome.NOT_FOUND: "red",
    Outcome.BACKEND_UNAVAILABLE: "red",
    Outcome.OPERATION_FAILED: "red",
}


def _say(text: str, style: str = "") -> None:
    text = escape(text)
    console.print(f"[{style}]{text}[/{style}]" if style else text)


def _unavailable(backend: Backend) -> str:
    label = BACKENDS[backend].tool_label()
    return f"Error: {label} is not installed or configured properly."


def show_results(backend: Backend, query: str) -> int:
    """Print normalized search results of one backend; returns the record count."""
    adapter = BACKENDS[backend]
    count = 0
    for record in normalize(backend, adapter.search(query)):
        console.print(render_record(record))
        count += 1
    if not count:
        _say(f"No results found in {backend.label} repositories.", "yellow")
    return count


@handle_errors
def find(name: str) -> int:
    if not name:
        raise InvalidInput("find requires a package name")

    for backend in (Backend.CONTAINERIZED, Backend.NORMAL):
        _say(f"Searching in {backend.label} repositories...", "cyan")
        if not BACKENDS[backend].available():
            _say(_unavailable(backend), "red")
            continue
        show_results(backend, name)
    return 0


def _choose(prompts: Prompts, action: str) -> Backend:
    backend = prompts.choose_backend(action)
    if backend is None:
        raise InvalidInput("Invalid choice. Please select C for Containerized or N for Normal.")
    logger.debug("%s via %s", action, backend.label)
    return backend


def _check_available(backend: Backend, name: str):
    if BACKENDS[backend].available():
        return None
    return OperationResult(backend, name, Outcome.BACKEND_UNAVAILABLE, _unavailable(backend))


def install_containerized(name: str, prompts: Prompts) -> OperationResult:
    _say(f"Searching for '{name}' in Containerized repositories...", "cyan")
    show_results(Backend.CONTAINERIZED, name)
    app_id = prompts.ask_app_id()
    return flatpak.install(app_id, prompts.auto_confirm)


def install_normal(name: str, prompts: Prompts) -> OperationResult:
    _say(f"Attempting to install '{name}' via Normal repositories...", "cyan")
    if not default.is_listed(name):
        return OperationResult(Backend.NORMAL, name, Outcome.NOT_FOUND,
                               f"'{name}' not found in Normal repositories.")
    return default.install(name, prompts.auto_confirm)


def remove_normal(name: str, prompts: Prompts) -> OperationResult:
    _say(f"Attempting to remove '{name}' via Normal repositories...", "cyan")
    if not default.is_installed(name):
        return OperationResult(Backend.NORMAL, name, Outcome.NOT_FOUND,
                               f"'{name}' is not installed via Normal repositories.")
    return default.remove(name, prompts.auto_confirm)


@handle_errors
def install(name: str, prompts: Prompts) -> OperationResult:
    if not name:
        raise InvalidInput("install requires a package name")

    backend = _choose(prompts, "install")
    result = _check_available(backend, name)
    if result is None:
        if backend is Backend.CONTAINERIZED:
            result = install_containerized(name, prompts)
        else:
            result = install_normal(name, prompts)
    report(result)
    return result


@handle_errors
def remove(name: str, prompts: Prompts) -> OperationResult:
    if not name:
        raise InvalidInput("remove requires a package name")

    backend = _choose(prompts, "remove")
    result = _check_available(backend, name)
    if result is None:
        if backend is Backend.CONTAINERIZED:
            result = flatpak.remove(name, prompts)
        else:
            result = remove_normal(name, prompts)
    report(result)
    return result


def report(result: OperationResult) -> None:
    logger.debug("%s %s → %s", result.backend.label, result.package, result.outcome.name)
    if result.message:
        _say(result.message, STYLES[result.outcome])


def exit_code(result) -> int:
    """0 for success or a user cancellation, 1 for everything else."""
    if isinstance(result, int):
        return result
    return 0 if result is not None and result.ok else 1
