# ropm/prompts.py

from typing import Optional

from rich.prompt import Prompt

from ropm.models import Backend
from ropm.utils.output import console

CHOICE_HINT = "Enter C for Containerized or N for Normal"


def parse_choice(answer: str) -> Optional[Backend]:
    """Maps a typed answer to a backend by its first letter, case-insensitively."""
    first = answer.strip()[:1].lower()
    if first == "c":
        return Backend.CONTAINERIZED
    if first == "n":
        return Backend.NORMAL
    return None


def is_affirmative(answer: str) -> bool:
    return answer.strip()[:1].lower() == "y"


class Prompts:
    """Every blocking question ropm asks goes through here.

    `auto_confirm` is fixed at construction. When set, confirmations pass
    without reading input; backend choice and App ID entry still prompt
    unless a backend was preselected.
    """

    def __init__(self, auto_confirm: bool = False, backend: Optional[str] = None):
        self._auto_confirm = auto_confirm
        self._backend = backend

    @property
    def auto_confirm(self) -> bool:
        return self._auto_confirm

    def _ask(self, question: str) -> str:
        return Prompt.ask(question, console=console, default="", show_default=False)

    def choose_backend(self, action: str) -> Optional[Backend]:
        if self._backend is not None:
            return parse_choice(self._backend)
        where = "as" if action == "install" else "from"
        console.print(
            f"Do you want to {action} the application {where} Containerized "
            "(sandboxed) or Normal (system-wide)?"
        )
        return parse_choice(self._ask(CHOICE_HINT))

    def confirm(self, question: str) -> bool:
        if self._auto_confirm:
            return True
        return is_affirmative(self._ask(f"{question} (y/N)"))

    def ask_app_id(self) -> str:
        console.print(
            "Please enter the App ID of the application you want to install, "
            "or type 0 to cancel:"
        )
        return self._ask("App ID").strip()
