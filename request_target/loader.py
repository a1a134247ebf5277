"""Request target file loading.

Reads a text file holding one request target per line, the way targets
are usually collected from access logs or proxy captures.
"""

from __future__ import annotations

COMMENT_PREFIX = "#"


def parse_targets(raw_text: str) -> list[str]:
    """Split raw text into request targets.

    Empty lines and lines starting with ``#`` are skipped. Every other
    line is kept as-is, so whitespace around a target is left for the
    classifier to reject.

    Args:
        raw_text: The file contents.

    Returns:
        The targets in file order.
    """
    # Normalize line endings: replace \r\n with \n, then split
    normalized = raw_text.replace("\r\n", "\n")

    targets: list[str] = []
    for line in normalized.split("\n"):
        if not line or line.startswith(COMMENT_PREFIX):
            continue
        targets.append(line)
    return targets


def load_targets_file(filepath: str) -> list[str]:
    """Read and return the request targets stored in a file.

    Args:
        filepath: Path to the targets text file.

    Returns:
        The targets in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not UTF-8 text.
    """
    with open(filepath, "r", encoding="utf-8") as fh:
        return parse_targets(fh.read())
