"""Reading tile maps from comma-separated level files."""

from __future__ import annotations

from typing import List


def split(text: str, delim: str = ",") -> List[int]:
    """Split ``text`` on ``delim`` and parse every piece as an integer.

    Raises ValueError if a piece is not an integer, including an empty piece.
    """
    return [int(piece) for piece in text.split(delim)]


def load_level(path: str, width: int, height: int) -> List[List[int]]:
    """Read a level of at most ``height`` rows of at most ``width`` tiles.

    Each line of the file is one row of tile numbers. Raises OSError if the
    file cannot be read and ValueError if a line is malformed or the level
    does not fit the given size.
    """
    with open(path, encoding="utf-8") as handle:
        lines = handle.read().splitlines()

    if len(lines) > height:
        raise ValueError(f"{path}: level has {len(lines)} rows, expected at most {height}")

    level: List[List[int]] = []
    for number, line in enumerate(lines, start=1):
        row = split(line, ",")
        if len(row) > width:
            raise ValueError(
                f"{path}:{number}: row has {len(row)} tiles, expected at most {width}"
            )
        level.append(row)
    return level