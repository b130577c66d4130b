"""
Order assembly from document lines.

Flow:
  1. Normalize lines, collect the attachment filename
  2. Extract sender and receiver company blocks
  3. Resolve loading/delivery dates and their time windows
  4. Build one loading and one destination location
  5. Extract cargo rows
  6. Extract order reference (synthesized if missing)
  7. Extract transport numbers, comment, incoterms
  8. Assemble the OrderRecord (and hand it to the sink in ``run``)

Every pass reads the same normalized line list and falls back to a default,
so any input produces a schema-valid order.
"""

import logging
import random
import string
from collections.abc import Callable, Sequence
from datetime import datetime, timedelta

from dateutil import tz

from order_intake.config import Settings
from order_intake.order_extractor.cargo import extract_cargos
from order_intake.order_extractor.company import extract_company, normalize_company
from order_intake.order_extractor.countries import CountryResolver, TableCountryResolver
from order_intake.order_extractor.fields import extract_line_value, find_date, to_iso8601
from order_intake.order_extractor.keywords import DEFAULT_KEYWORDS, KeywordTable
from order_intake.order_extractor.lines import normalize_lines
from order_intake.schemas.order import (
    CompanyRecord,
    Customer,
    CustomerSide,
    LocationRecord,
    OrderRecord,
    OrderSubmission,
    TimeWindow,
)
from order_intake.services.order_sink import OrderSink, SchemaValidatingSink

logger = logging.getLogger("intake.pipeline")


def random_alphanumeric(length: int) -> str:
    return "".join(random.choices(string.ascii_uppercase + string.digits, k=length))


def window_from(start: datetime, hours: int) -> TimeWindow:
    """Time window of ``hours`` elapsed hours beginning at ``start``.

    A start that falls into a DST gap is moved forward to the first real
    local time. The end is computed in UTC and shown in the start's zone.

    Raises:
        OverflowError: The window runs past the representable date range.
    """
    start = tz.resolve_imaginary(start)
    end = (start.astimezone(tz.UTC) + timedelta(hours=hours)).astimezone(start.tzinfo)
    return TimeWindow(datetime_from=to_iso8601(start), datetime_to=to_iso8601(end))


class OrderAssembler:
    """Runs the extraction passes and assembles the order."""

    def __init__(
        self,
        settings: Settings,
        country_resolver: CountryResolver | None = None,
        sink: OrderSink | None = None,
        keywords: KeywordTable = DEFAULT_KEYWORDS,
        clock: Callable[[], datetime] | None = None,
        random_token: Callable[[int], str] = random_alphanumeric,
    ):
        self.settings = settings
        self.country_resolver = country_resolver or TableCountryResolver()
        self.sink = sink or SchemaValidatingSink()
        self.keywords = keywords
        self.tz = tz.gettz(settings.timezone) or tz.UTC
        self.clock = clock or (lambda: datetime.now(self.tz))
        self.random_token = random_token

    def process_lines(
        self, lines: Sequence[str], attachment_filename: str | None = None
    ) -> OrderRecord:
        """Assemble an order from raw document lines without submitting it."""
        lines = normalize_lines(lines)
        attachment_filenames = [attachment_filename] if attachment_filename else []
        logger.info("Assembling order from %d lines", len(lines))

        sender = self._extract_company(lines, self.keywords.sender)
        receiver = self._extract_company(lines, self.keywords.receiver)

        now = self.clock()
        loading_window = self._time_window(
            lines, self.keywords.loading_date, now, self.settings.loading_window_hours
        )
        delivery_window = self._time_window(
            lines,
            self.keywords.delivery_date,
            now + timedelta(days=self.settings.delivery_default_offset_days),
            self.settings.delivery_window_hours,
        )

        loading_locations = [LocationRecord(company_address=sender, time=loading_window)]
        destination_locations = [LocationRecord(company_address=receiver, time=delivery_window)]

        cargos = extract_cargos(
            lines,
            self.keywords.cargo_row,
            currency=self.settings.default_currency,
            package_type=self.settings.default_package_type,
        )

        order_reference = extract_line_value(lines, self.keywords.order_reference, first_only=True)
        if not order_reference:
            order_reference = self._synthetic_reference()
            logger.debug("No order reference found, generated %s", order_reference)

        return OrderRecord(
            attachment_filenames=attachment_filenames,
            customer=Customer(
                side=CustomerSide.SENDER,
                details=normalize_company(sender, default_city=self.settings.default_city),
            ),
            loading_locations=loading_locations,
            destination_locations=destination_locations,
            cargos=cargos,
            order_reference=order_reference,
            freight_price=0.0,
            freight_currency=self.settings.default_currency,
            transport_numbers=extract_line_value(lines, self.keywords.transport_numbers) or "",
            comment=extract_line_value(lines, self.keywords.comment) or "",
            incoterms=extract_line_value(lines, self.keywords.incoterms)
            or self.settings.default_incoterms,
        )

    def run(
        self, lines: Sequence[str], attachment_filename: str | None = None
    ) -> OrderSubmission:
        """Assemble an order and hand it to the sink."""
        order = self.process_lines(lines, attachment_filename)
        return self.sink.create_order(order)

    def _extract_company(self, lines: list[str], keywords: Sequence[str]) -> CompanyRecord:
        return extract_company(
            lines,
            keywords,
            self.country_resolver,
            default_country=self.settings.default_country,
            default_city=self.settings.default_city,
        )

    def _time_window(
        self, lines: list[str], keyword: str, fallback: datetime, window_hours: int
    ) -> TimeWindow:
        """Window starting at the document's date for ``keyword``, else at ``fallback``."""
        resolved = find_date(
            lines, keyword, default_tz=self.tz, dayfirst=self.settings.date_dayfirst
        )
        if resolved is not None:
            try:
                return window_from(resolved, window_hours)
            except OverflowError:
                logger.debug("%r %s leaves no room for the window", keyword, resolved)
        else:
            logger.debug("No usable %r in document", keyword)

        logger.debug("Using %s for %r", to_iso8601(fallback), keyword)
        return window_from(fallback, window_hours)

    def _synthetic_reference(self) -> str:
        token = self.random_token(self.settings.order_reference_length).upper()
        return f"{self.settings.order_reference_prefix}{token}"
