from ropm.models import DEFAULT_DESCRIPTION, Backend, SearchRecord
from ropm.normalize import (
    format_record,
    normalize,
    parse_containerized_line,
    parse_normal_line,
    render_record,
)


def test_parse_containerized_line_splits_three_fields() -> None:
    record = parse_containerized_line("org.example.App\tExample App\tAn example.")

    assert record == SearchRecord(
        backend=Backend.CONTAINERIZED,
        identifier="org.example.App",
        display_name="Example App",
        description="An example.",
        raw="org.example.App\tExample App\tAn example.",
    )


def test_parse_containerized_line_defaults_missing_description() -> None:
    record = parse_containerized_line("org.example.App\tExample App")

    assert record is not None
    assert record.description == "No description available."


def test_parse_containerized_line_defaults_blank_description() -> None:
    record = parse_containerized_line("org.example.App\tExample App\t   ")

    assert record is not None
    assert record.description == DEFAULT_DESCRIPTION


def test_parse_containerized_line_skips_header_and_noise() -> None:
    assert parse_containerized_line("Application ID\tName\tDescription") is None
    assert parse_containerized_line("Application ID Name Description") is None
    assert parse_containerized_line("") is None
    assert parse_containerized_line("\tName only\tdesc") is None
    assert parse_containerized_line("No matches found") is None


def test_parse_containerized_line_keeps_lone_app_id() -> None:
    record = parse_containerized_line("org.example.Lonely")

    assert record is not None
    assert record.identifier == "org.example.Lonely"
    assert record.display_name == ""


def test_parse_normal_line_tags_line_unparsed() -> None:
    line = "curl.x86_64 : A utility for getting files from remote servers"

    record = parse_normal_line(line)

    assert record is not None
    assert record.backend is Backend.NORMAL
    assert record.identifier == "curl.x86_64"
    assert record.description == "A utility for getting files from remote servers"
    assert record.raw == line


def test_parse_normal_line_without_summary_uses_default() -> None:
    record = parse_normal_line("======== Name Matched: curl ========")

    assert record is not None
    assert record.identifier == "========"
    assert record.description == DEFAULT_DESCRIPTION
    assert parse_normal_line("   ") is None


def test_normalize_preserves_order_and_drops_bad_lines() -> None:
    lines = [
        "Application ID\tName\tDescription",
        "org.b.Second\tSecond\tsecond app",
        "",
        "org.a.First\tFirst",
    ]

    records = list(normalize(Backend.CONTAINERIZED, lines))

    assert [r.identifier for r in records] == ["org.b.Second", "org.a.First"]


def test_normalize_is_lazy() -> None:
    seen: list[str] = []

    def lines():
        for line in ["a : one", "b : two"]:
            seen.append(line)
            yield line

    records = normalize(Backend.NORMAL, lines())
    assert seen == []

    first = next(records)

    assert first.identifier == "a"
    assert seen == ["a : one"]


def test_format_record_per_backend() -> None:
    flat = parse_containerized_line("org.example.App\tExample App\tAn example.")
    native = parse_normal_line("curl.x86_64 : A utility")

    assert format_record(flat) == (
        "[Containerized] Name: Example App, App ID: org.example.App, "
        "Description: An example."
    )
    assert format_record(native) == "[Normal] curl.x86_64 : A utility"


def test_render_record_escapes_markup() -> None:
    record = parse_normal_line("pkg : has [bold] in it")

    rendered = render_record(record)

    assert rendered.startswith("[magenta]")
    assert "Normal]" in rendered
    assert "\\[bold]" in rendered


def test_parse_normal_line_passes_continuation_lines_through() -> None:
    line = "    Command line tool and library for transferring data with URLs"

    record = parse_normal_line(line)

    assert record is not None
    assert record.identifier == "Command"
    assert format_record(record) == f"[Normal] {line}"
