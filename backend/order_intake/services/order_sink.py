"""
Submission sink for assembled orders.

The sink is the hand-off point after extraction. The default implementation
re-validates the serialized order against the OrderRecord schema and keeps
the accepted output for the caller.
"""

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Protocol

from pydantic import ValidationError

from order_intake.schemas.order import OrderRecord, OrderSubmission

logger = logging.getLogger("intake.sink")


class OrderSubmissionError(Exception):
    """Raised when a sink rejects an assembled order."""


class OrderSink(Protocol):
    def create_order(self, order: OrderRecord) -> OrderSubmission: ...


class SchemaValidatingSink:
    """Accepts orders whose JSON form validates against OrderRecord."""

    def __init__(self, clock: Callable[[], datetime] | None = None):
        self.clock = clock or (lambda: datetime.now(timezone.utc))
        self._output: OrderSubmission | None = None

    def create_order(self, order: OrderRecord) -> OrderSubmission:
        payload = order.model_dump(mode="json")
        try:
            validated = OrderRecord.model_validate(payload)
        except ValidationError as e:
            logger.error(
                "Order %s failed schema validation: %d errors",
                order.order_reference, e.error_count(),
            )
            raise OrderSubmissionError(
                f"Order {order.order_reference} failed schema validation"
            ) from e

        self._output = OrderSubmission(
            order_reference=validated.order_reference,
            order=validated,
            submitted_at=self.clock(),
        )
        logger.info("Accepted order %s", validated.order_reference)
        return self._output

    def get_output(self) -> OrderSubmission | None:
        """Last accepted submission, if any."""
        return self._output
