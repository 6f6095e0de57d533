import pathlib

OS_RELEASE = pathlib.Path("/etc/os-release")


def read_os_release(path: pathlib.Path = OS_RELEASE) -> dict[str, str]:
    """KEY=value pairs of an os-release file, quotes stripped. Empty if missing."""
    if not path.exists():
        return {}
    fields = {}
    for line in path.read_text().splitlines():
        key, sep, value = line.partition("=")
        if sep and not key.startswith("#"):
            fields[key.strip()] = value.strip().strip('"')
    return fields


def os_ids(path: pathlib.Path = OS_RELEASE) -> list[str]:
    """The distribution ID followed by its ID_LIKE parents, lower-cased."""
    fields = read_os_release(path)
    ids = [fields.get("ID", "")] + fields.get("ID_LIKE", "").split()
    return [i.lower() for i in ids if i]
