from __future__ import annotations

from typing import List, Optional

_PATH_KEY = '"path"'


def _second_quoted(line: str) -> Optional[str]:
    """Return the contents of the second quoted string on a line.

    libraryfolders.vdf lines look like ``"key"<tabs>"value"``, so the value sits
    between the third and fourth quote characters.
    """

    quotes: List[int] = []
    start = 0
    while len(quotes) < 4:
        idx = line.find('"', start)
        if idx < 0:
            return None
        quotes.append(idx)
        start = idx + 1
    return line[quotes[2] + 1 : quotes[3]]


def parse_library_folders(text: str) -> List[str]:
    """Extract Steam library roots from the contents of libraryfolders.vdf.

    Example input::

        "libraryfolders"
        {
            "0"
            {
                "path"		"C:\\\\Program Files (x86)\\\\Steam"
            }
        }

    Paths are returned in file order with doubled backslashes collapsed.
    Lines that do not parse are skipped; this never raises.
    """

    paths: List[str] = []
    for line in (text or "").split("\n"):
        trimmed = line.strip()
        if trimmed[: len(_PATH_KEY)].lower() != _PATH_KEY:
            continue

        value = _second_quoted(trimmed)
        if not value:
            continue
        paths.append(value.replace("\\\\", "\\"))

    return paths
