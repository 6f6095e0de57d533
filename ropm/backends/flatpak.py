# ropm/backends/flatpak.py

import logging
from typing import Iterator, Optional

from ropm.models import Backend, OperationResult, Outcome
from ropm.utils import shell
from ropm.utils.output import console

logger = logging.getLogger(__name__)

backend = Backend.CONTAINERIZED
TOOL = "flatpak"
CANCEL_SENTINEL = "0"
SEARCH_COLUMNS = "application,name,description"


def tool_label() -> str:
    return "Flatpak"


def available() -> bool:
    return shell.have(TOOL)


def search(query: str) -> Iterator[str]:
    """
    Raw `flatpak search` rows: application ID, name and description, tab separated.
    """
    return shell.output_lines([TOOL, "search", f"--columns={SEARCH_COLUMNS}", query])


def installed_apps() -> list[str]:
    lines = shell.output_lines([TOOL, "list", "--app", "--columns=application"])
    return [l.strip() for l in lines if l.strip()]


def resolve_installed(name: str) -> Optional[str]:
    """
    Installed app ID for `name`: exact match first, then substring,
    both case-insensitive.
    """
    wanted = name.lower()
    apps = installed_apps()
    for app_id in apps:
        if app_id.lower() == wanted:
            return app_id
    partial = [a for a in apps if wanted in a.lower()]
    if len(partial) > 1:
        logger.warning("'%s' matches %s; using %s", name, ", ".join(partial), partial[0])
    return partial[0] if partial else None


def _result(app_id: str, outcome: Outcome, message: str) -> OperationResult:
    return OperationResult(backend, app_id, outcome, message)


def install(app_id: str, auto_confirm: bool = False) -> OperationResult:
    """
    flatpak install [-y] <app-id>
    """
    app_id = app_id.strip()
    if app_id == CANCEL_SENTINEL:
        return _result(app_id, Outcome.CANCELLED, "Installation cancelled.")
    if not app_id:
        return _result(app_id, Outcome.CANCELLED, "No App ID provided. Installation cancelled.")

    cmd = [TOOL, "install"] + (["-y"] if auto_confirm else []) + [app_id]
    if not shell.call(cmd):
        return _result(app_id, Outcome.OPERATION_FAILED,
                       "Error: Failed to install the Flatpak application.")
    return _result(app_id, Outcome.SUCCESS,
                   f"Successfully installed the Flatpak application: {app_id}")


def prune_unused(auto_confirm: bool = False) -> bool:
    """
    flatpak uninstall [-y] --unused
    """
    cmd = [TOOL, "uninstall"] + (["-y"] if auto_confirm else []) + ["--unused"]
    ok = shell.call(cmd)
    if not ok:
        logger.warning("Removing unused runtimes failed")
    return ok


def remove(name: str, prompts) -> OperationResult:
    """
    Resolve `name` among installed apps and uninstall it with its data.
    """
    name = name.strip()
    if name in ("", CANCEL_SENTINEL):
        return _result(name, Outcome.CANCELLED, "Uninstallation cancelled.")

    console.print(f"Searching for '{name}' in installed Containerized applications...",
                  markup=False)
    app_id = resolve_installed(name)
    if app_id is None:
        return _result(name, Outcome.NOT_FOUND, "\n".join([
            f"No matching Flatpak application found for '{name}'.",
            "Please ensure the application name is correct. "
            "You can list installed Flatpak applications using:",
            "  flatpak list --app",
        ]))

    console.print(f"The following Flatpak application will be removed: {app_id}", markup=False)
    if not prompts.confirm("Do you want to proceed?"):
        return _result(app_id, Outcome.CANCELLED, "Uninstallation cancelled.")

    auto = prompts.auto_confirm
    cmd = [TOOL, "uninstall"] + (["-y"] if auto else []) + ["--delete-data", app_id]
    if not shell.call(cmd):
        return _result(app_id, Outcome.OPERATION_FAILED,
                       "Error: Failed to uninstall the Flatpak application.")

    if prompts.confirm("Do you want to remove unused Flatpak runtimes to free up space?"):
        prune_unused(auto)
    else:
        console.print("Unused runtimes were not removed.")

    return _result(app_id, Outcome.SUCCESS,
                   f"Successfully uninstalled the Flatpak application: {app_id}")
