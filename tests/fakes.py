from typing import Optional

from ropm.models import Backend


class FakePrompts:
    """Answers every question from a fixed script."""

    def __init__(
        self,
        auto_confirm: bool = False,
        choice: Optional[Backend] = None,
        confirms: Optional[list[bool]] = None,
        app_id: str = "",
    ) -> None:
        self.auto_confirm = auto_confirm
        self.choice = choice
        self.confirms = list(confirms or [])
        self.app_id = app_id
        self.questions: list[str] = []

    def choose_backend(self, action: str) -> Optional[Backend]:
        self.questions.append(f"backend:{action}")
        return self.choice

    def confirm(self, question: str) -> bool:
        self.questions.append(question)
        if self.auto_confirm:
            return True
        return self.confirms.pop(0) if self.confirms else False

    def ask_app_id(self) -> str:
        self.questions.append("app_id")
        return self.app_id


class CommandLog:
    """Stands in for ropm.utils.shell.call / output_lines."""

    def __init__(self, outputs: Optional[dict[str, list[str]]] = None, fail: bool = False) -> None:
        self.outputs = outputs or {}
        self.fail = fail
        self.calls: list[list[str]] = []
        self.queries: list[list[str]] = []

    def call(self, cmd: list[str]) -> bool:
        self.calls.append(cmd)
        return not self.fail

    def output_lines(self, cmd: list[str]):
        self.queries.append(cmd)
        key = " ".join(cmd)
        for prefix, lines in self.outputs.items():
            if key.startswith(prefix):
                return iter(lines)
        return iter([])

    def install(self, monkeypatch) -> "CommandLog":
        from ropm.utils import shell

        monkeypatch.setattr(shell, "call", self.call)
        monkeypatch.setattr(shell, "output_lines", self.output_lines)
        return self
