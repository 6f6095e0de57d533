# ropm/models.py

from dataclasses import dataclass
from enum import Enum

DEFAULT_DESCRIPTION = "No description available."


class Backend(Enum):
    CONTAINERIZED = "Containerized"
    NORMAL = "Normal"

    @property
    def label(self) -> str:
        return self.value


class Outcome(Enum):
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    BACKEND_UNAVAILABLE = "backend_unavailable"
    OPERATION_FAILED = "operation_failed"
    CANCELLED = "cancelled"


@dataclass(frozen=True, slots=True)
class SearchRecord:
    """One match returned by a backend search.

    Attributes:
        backend: Backend that produced the line.
        identifier: App ID (Containerized) or the first token of the line (Normal).
            Never empty. Normal identifiers are best-effort: section banners and
            indented description lines keep whatever word comes first.
        display_name: Human readable name.
        description: Summary text, defaults to DEFAULT_DESCRIPTION.
        raw: The untouched output line.
    """

    backend: Backend
    identifier: str
    display_name: str = ""
    description: str = DEFAULT_DESCRIPTION
    raw: str = ""


@dataclass(frozen=True, slots=True)
class OperationResult:
    """Final state of an install/remove flow."""

    backend: Backend
    package: str
    outcome: Outcome
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome in (Outcome.SUCCESS, Outcome.CANCELLED)
