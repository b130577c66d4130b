"""Line helpers shared by every extraction pass."""

from collections.abc import Iterable, Sequence


def normalize_lines(lines: Iterable[str | None]) -> list[str]:
    """Trim every line and drop the empty ones, keeping document order."""
    return [line.strip() for line in lines if line and line.strip()]


def value_after_delimiter(line: str, delimiter: str = ":") -> str:
    """Text after the first delimiter, or the whole line when there is none."""
    _, sep, tail = line.partition(delimiter)
    return (tail if sep else line).strip()


def contains_any(line: str, keywords: Sequence[str]) -> bool:
    """Case-insensitive substring test against a keyword set."""
    lowered = line.lower()
    return any(kw.lower() in lowered for kw in keywords)
