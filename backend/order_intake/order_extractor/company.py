"""
Company block extraction and normalization.

Party lines are found by role keyword. Each matching line fills the next
empty slot of the fill table, so a document listing name, contact, street and
country under the same role cue yields a complete address block.
"""

import enum
import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from order_intake.order_extractor.countries import CountryResolver
from order_intake.order_extractor.lines import contains_any, value_after_delimiter
from order_intake.schemas.order import CompanyRecord

logger = logging.getLogger("intake.company")

COMPANY_FIELDS = tuple(CompanyRecord.model_fields)

MIN_CITY_LENGTH = 2
COUNTRY_CODE_LENGTH = 2


class CompanySlot(enum.Flag):
    NONE = 0
    NAME = enum.auto()
    CONTACT = enum.auto()
    ADDRESS = enum.auto()
    COUNTRY = enum.auto()


def _country_value(value: str, resolver: CountryResolver) -> str:
    return resolver.resolve_iso(value) or ""


# (slot, record field, value converter) in fill order
FILL_ORDER: tuple[tuple[CompanySlot, str, Callable[[str, CountryResolver], str]], ...] = (
    (CompanySlot.NAME, "company", lambda value, _: value),
    (CompanySlot.CONTACT, "contact_person", lambda value, _: value),
    (CompanySlot.ADDRESS, "street_address", lambda value, _: value),
    (CompanySlot.COUNTRY, "country", _country_value),
)


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    return str(value)


def normalize_company(
    company: CompanyRecord | Mapping[str, Any], default_city: str = "NA"
) -> CompanyRecord:
    """Coerce a company block into a schema-valid record.

    Every field becomes a string (None -> ""), short cities become
    ``default_city`` and anything that is not a two-character country code is
    cleared. Applying it to its own output changes nothing.
    """
    raw = company.model_dump() if isinstance(company, CompanyRecord) else dict(company)
    data = {name: _to_text(raw.get(name)) for name in COMPANY_FIELDS}

    if len(data["city"]) < MIN_CITY_LENGTH:
        data["city"] = default_city
    if len(data["country"]) != COUNTRY_CODE_LENGTH:
        data["country"] = ""

    return CompanyRecord(**data)


def extract_company(
    lines: Sequence[str],
    keywords: Sequence[str],
    resolver: CountryResolver,
    default_country: str = "DE",
    default_city: str = "NA",
) -> CompanyRecord:
    """Build a company record from the lines carrying a role keyword.

    Args:
        lines: Normalized document lines, scanned in order.
        keywords: Role cues such as ("shipper", "sender", "customer").
        resolver: Country lookup for the country slot.
        default_country: Country kept when no line reaches the country slot.
        default_city: City used when the document gives none.

    Returns:
        Normalized CompanyRecord.
    """
    data: dict[str, Any] = {name: "" for name in COMPANY_FIELDS}
    data["city"] = default_city
    data["country"] = default_country
    filled = CompanySlot.NONE

    for line in lines:
        if not contains_any(line, keywords):
            continue
        value = value_after_delimiter(line)
        if not value:
            continue
        for slot, field_name, convert in FILL_ORDER:
            if slot in filled:
                continue
            data[field_name] = convert(value, resolver)
            filled |= slot
            break

    if filled != CompanySlot.NONE:
        logger.debug("Company for %s filled slots: %s", keywords, filled)

    return normalize_company(data, default_city=default_city)
