"""
Cargo row extraction.

Candidate lines are picked by quantity/weight cues. A candidate is read
either through one of the row patterns (e.g. "Item PALLET01 Qty 5") or by
splitting it into whitespace-separated columns and mapping them by position:

    0 title | 1 package count | 2 number | 3 value | 4 weight

There is no header detection; columns in a different order end up in the
wrong fields.
"""

import logging
import math
import re
from collections.abc import Sequence
from dataclasses import dataclass

from order_intake.order_extractor.keywords import CARGO_ROW_KEYWORDS
from order_intake.schemas.order import CargoRecord

logger = logging.getLogger("intake.cargo")

COLUMN_SPLIT_RE = re.compile(r"\s{2,}")
LEADING_NUMBER_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)")
LEADING_INTEGER_RE = re.compile(r"^[+-]?\d+")

MIN_COLUMNS = 2
DEFAULT_TITLE = "Cargo"
DEFAULT_CARGO_TITLE = "Default cargo"


@dataclass(frozen=True)
class CargoRowPattern:
    """Regex for a single-line cargo layout with title/count groups."""

    name: str
    regex: re.Pattern

    def parse(self, line: str) -> tuple[str, int] | None:
        match = self.regex.search(line)
        if not match:
            return None
        return match.group("title"), to_int(match.group("count"))


ROW_PATTERNS: tuple[CargoRowPattern, ...] = (
    CargoRowPattern(
        name="item_qty",
        regex=re.compile(r"^Item\s+(?P<title>\w+)\s+Qty\s+(?P<count>[0-9]+)", re.IGNORECASE),
    ),
)


def uncomma(text: str) -> str:
    """Drop thousands separators: "1,250.5" -> "1250.5"."""
    return text.replace(",", "").strip()


def to_float(text: str | None, default: float = 0.0) -> float:
    """Leading numeric prefix of ``text`` as float; 0 when there is none or it is not finite."""
    if text is None:
        return default
    match = LEADING_NUMBER_RE.match(uncomma(text))
    if not match:
        return 0.0
    value = float(match.group(0))
    return value if math.isfinite(value) else 0.0


def to_int(text: str | None, default: int = 1) -> int:
    if text is None:
        return default
    match = LEADING_INTEGER_RE.match(uncomma(text))
    if not match:
        return 0
    try:
        return max(int(match.group(0)), 0)
    except ValueError:
        # Beyond the interpreter's integer string length limit
        return 0


def build_cargo(
    title: str, package_count: int = 1, currency: str = "EUR", package_type: str = "EPAL", **fields
) -> CargoRecord:
    """CargoRecord with the fixed defaults for everything not given."""
    return CargoRecord(
        title=title,
        package_count=package_count,
        package_type=package_type,
        currency=currency,
        type="full",
        palletized=True,
        **fields,
    )


def default_cargo(currency: str = "EUR", package_type: str = "EPAL") -> CargoRecord:
    return build_cargo(DEFAULT_CARGO_TITLE, 1, currency=currency, package_type=package_type)


def _column(columns: list[str], index: int) -> str | None:
    return columns[index] if index < len(columns) else None


def parse_cargo_row(
    line: str, currency: str = "EUR", package_type: str = "EPAL"
) -> CargoRecord | None:
    """Read one candidate line, or None if it has too few columns."""
    for pattern in ROW_PATTERNS:
        parsed = pattern.parse(line)
        if parsed:
            title, count = parsed
            return build_cargo(title, count, currency=currency, package_type=package_type)

    columns = COLUMN_SPLIT_RE.split(line.strip())
    if len(columns) < MIN_COLUMNS:
        return None

    return build_cargo(
        _column(columns, 0) or DEFAULT_TITLE,
        to_int(_column(columns, 1), default=1),
        currency=currency,
        package_type=package_type,
        number=_column(columns, 2) or "",
        value=to_float(_column(columns, 3)),
        weight=to_float(_column(columns, 4)),
    )


def extract_cargos(
    lines: Sequence[str],
    keywords: Sequence[str] = CARGO_ROW_KEYWORDS,
    currency: str = "EUR",
    package_type: str = "EPAL",
) -> list[CargoRecord]:
    """Extract cargo rows; never returns an empty list."""
    pattern = re.compile("|".join(re.escape(kw) for kw in keywords), re.IGNORECASE)
    cargos: list[CargoRecord] = []

    for line in lines:
        if not pattern.search(line):
            continue
        cargo = parse_cargo_row(line, currency=currency, package_type=package_type)
        if cargo is None:
            logger.debug("Skipping cargo candidate with too few columns: %r", line)
            continue
        cargos.append(cargo)

    if not cargos:
        logger.debug("No cargo rows found, using default cargo")
        cargos.append(default_cargo(currency=currency, package_type=package_type))

    return cargos
