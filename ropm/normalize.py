# ropm/normalize.py

from typing import Callable, Iterable, Iterator, Optional

from rich.markup import escape

from ropm.models import DEFAULT_DESCRIPTION, Backend, SearchRecord

FLATPAK_HEADER = "Application ID Name Description"


def _collapse(line: str) -> str:
    return " ".join(line.split())


def parse_containerized_line(line: str) -> Optional[SearchRecord]:
    """Parses one `flatpak search --columns=application,name,description` row."""
    if not line.strip() or _collapse(line) == FLATPAK_HEADER:
        return None

    fields = line.split("\t")
    identifier = fields[0].strip()
    if not identifier:
        return None
    # App IDs never contain spaces; a lone free-text field is a status message.
    if len(fields) == 1 and " " in identifier:
        return None

    name = fields[1].strip() if len(fields) > 1 else ""
    description = fields[2].strip() if len(fields) > 2 else ""
    return SearchRecord(
        backend=Backend.CONTAINERIZED,
        identifier=identifier,
        display_name=name,
        description=description or DEFAULT_DESCRIPTION,
        raw=line,
    )


def parse_normal_line(line: str) -> Optional[SearchRecord]:
    """Tags one native package manager search line.

    The line is kept as-is; only its first token and the text after " : "
    are lifted out. Banners and indented continuation lines are tagged too,
    so their identifier is not a package name.
    """
    stripped = line.strip()
    if not stripped:
        return None
    identifier = stripped.split()[0]
    _, sep, summary = stripped.partition(" : ")
    return SearchRecord(
        backend=Backend.NORMAL,
        identifier=identifier,
        display_name=identifier,
        description=summary.strip() if sep and summary.strip() else DEFAULT_DESCRIPTION,
        raw=line,
    )


_PARSERS: dict[Backend, Callable[[str], Optional[SearchRecord]]] = {
    Backend.CONTAINERIZED: parse_containerized_line,
    Backend.NORMAL: parse_normal_line,
}


def normalize(backend: Backend, lines: Iterable[str]) -> Iterator[SearchRecord]:
    """Yields records for `lines` in order, dropping lines without an identifier."""
    parse = _PARSERS[backend]
    for line in lines:
        record = parse(line)
        if record is not None:
            yield record


def format_record(record: SearchRecord) -> str:
    """Plain-text rendering of a record."""
    if record.backend is Backend.CONTAINERIZED:
        return (
            f"[Containerized] Name: {record.display_name}, "
            f"App ID: {record.identifier}, Description: {record.description}"
        )
    return f"[{record.backend.label}] {record.raw}"


def render_record(record: SearchRecord) -> str:
    """`format_record` with the backend tag styled for the rich console."""
    tag = f"[{record.backend.label}]"
    text = format_record(record)[len(tag):]
    return f"[magenta]{escape(tag)}[/magenta]{escape(text)}"
