"""
Single-value field extraction.

Both extractors scan lines in document order and stop at the first line that
carries the keyword. Neither raises on document content: a missing or
unreadable value comes back as None and the caller supplies the default.
"""

import logging
from collections.abc import Sequence
from datetime import datetime, tzinfo

from dateutil import parser as date_parser
from dateutil import tz

from order_intake.order_extractor.lines import contains_any, value_after_delimiter

logger = logging.getLogger("intake.fields")


def extract_line_value(
    lines: Sequence[str], keywords: Sequence[str], first_only: bool = False
) -> str | None:
    """Return the value of the first line matching any keyword.

    Args:
        lines: Normalized document lines.
        keywords: Case-insensitive substrings identifying the field.
        first_only: Marks reference-style fields where the first hit is
            authoritative. The scan returns on the first non-empty value
            either way.

    Returns:
        Text after the first ``:`` (or the whole line), or None when no line
        yields a non-empty value.
    """
    for line in lines:
        if not contains_any(line, keywords):
            continue
        value = value_after_delimiter(line)
        if value:
            return value
    return None


def parse_datetime(
    text: str, default_tz: tzinfo | None = None, dayfirst: bool = True
) -> datetime | None:
    """Lenient date parsing; None when the text is not a date.

    ISO-8601 text is read as such. Anything else goes through the
    general parser, where ``dayfirst`` makes "10.01.2024" the 10th of January.
    """
    try:
        try:
            parsed = date_parser.isoparse(text)
        except ValueError:
            parsed = date_parser.parse(text, dayfirst=dayfirst)
    except (ValueError, OverflowError) as e:
        logger.debug("Unparseable date %r: %s", text, e)
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=default_tz or tz.UTC)
    return parsed


def to_iso8601(value: datetime) -> str:
    return value.isoformat(timespec="seconds")


def find_date(
    lines: Sequence[str],
    keyword: str,
    default_tz: tzinfo | None = None,
    dayfirst: bool = True,
) -> datetime | None:
    """Parse the date on the first line containing ``keyword``.

    Only the first matching line is considered; if its value does not parse
    the result is None rather than a later line's value.
    """
    for line in lines:
        if keyword.lower() in line.lower():
            return parse_datetime(value_after_delimiter(line), default_tz, dayfirst)
    return None


def extract_date(
    lines: Sequence[str],
    keyword: str,
    default_tz: tzinfo | None = None,
    dayfirst: bool = True,
) -> str | None:
    """ISO-8601 form of ``find_date``."""
    parsed = find_date(lines, keyword, default_tz, dayfirst)
    return to_iso8601(parsed) if parsed else None
