# ropm/backends/default.py

import logging
from itertools import islice
from typing import Iterator

from ropm.models import Backend, OperationResult, Outcome
from ropm.utils import shell
from ropm.utils.osdetect import os_ids

logger = logging.getLogger(__name__)

backend = Backend.NORMAL

# Per distribution family. "header" is how many leading search lines are
# column titles or metadata notices rather than matches.
COMMANDS = {
    "fedora": {
        "tool": "dnf",
        "label": "DNF",
        "search": ["dnf", "search"],
        "installed": ["dnf", "list", "installed"],
        "install": ["sudo", "dnf", "install"],
        "remove": ["sudo", "dnf", "remove"],
        "yes": "-y",
        "header": 1,
    },
    "debian": {
        "tool": "apt-get",
        "label": "APT",
        "search": ["apt-cache", "search"],
        "installed": ["dpkg-query", "-W", "--showformat=${Status}"],
        "installed_marker": "install ok installed",
        "install": ["sudo", "apt-get", "install"],
        "remove": ["sudo", "apt-get", "remove"],
        "yes": "-y",
        "header": 0,
    },
    "arch": {
        "tool": "pacman",
        "label": "Pacman",
        "search": ["pacman", "-Ss"],
        "installed": ["pacman", "-Q"],
        "install": ["sudo", "pacman", "-S"],
        "remove": ["sudo", "pacman", "-R"],
        "yes": "--noconfirm",
        "header": 0,
    },
}


# os-release IDs that share a command table with a family key above.
ALIASES = {
    "rhel": "fedora",
    "centos": "fedora",
    "ubuntu": "debian",
    "manjaro": "arch",
}


def family() -> str:
    """First os-release ID (own, then ID_LIKE) with a command table; dnf otherwise."""
    for id_ in os_ids():
        id_ = ALIASES.get(id_, id_)
        if id_ in COMMANDS:
            return id_
    return "fedora"


def commands() -> dict:
    return COMMANDS[family()]


def tool() -> str:
    return commands()["tool"]


def tool_label() -> str:
    return commands()["label"]


def available() -> bool:
    return shell.have(tool())


def search(query: str) -> Iterator[str]:
    """
    Raw search output with the leading header line(s) dropped.
    """
    table = commands()
    return islice(shell.output_lines(table["search"] + [query]), table["header"], None)


def is_listed(name: str) -> bool:
    """True if `name` shows up anywhere in a fresh search."""
    return any(name in line for line in search(name))


def is_installed(name: str) -> bool:
    """
    True if the package manager reports `name` as installed. Where the query
    also lists removed-but-known packages, its status marker must be present.
    """
    table = commands()
    wanted = table.get("installed_marker", name)
    return any(wanted in line for line in shell.output_lines(table["installed"] + [name]))


def _run(action: str, name: str, auto_confirm: bool) -> bool:
    table = commands()
    cmd = table[action] + ([table["yes"]] if auto_confirm else []) + [name]
    logger.debug("Running %s", cmd)
    return shell.call(cmd)


def install(name: str, auto_confirm: bool = False) -> OperationResult:
    """
    Privileged install through the native package manager.
    """
    if not _run("install", name, auto_confirm):
        return OperationResult(backend, name, Outcome.OPERATION_FAILED,
                               f"Error: Failed to install the package via {tool_label()}.")
    return OperationResult(backend, name, Outcome.SUCCESS,
                           f"Successfully installed '{name}' via {tool_label()}.")


def remove(name: str, auto_confirm: bool = False) -> OperationResult:
    """
    Privileged removal through the native package manager.
    """
    if not _run("remove", name, auto_confirm):
        return OperationResult(backend, name, Outcome.OPERATION_FAILED,
                               f"Error: Failed to remove the package via {tool_label()}.")
    return OperationResult(backend, name, Outcome.SUCCESS,
                           f"Successfully removed '{name}' via {tool_label()}.")
