"""Tests for the schema-validating order sink."""

import pytest

from order_intake.schemas.order import CargoRecord, Customer, OrderRecord
from order_intake.services.order_sink import OrderSubmissionError, SchemaValidatingSink

from conftest import FIXED_NOW


def _order(**overrides) -> OrderRecord:
    data = {
        "customer": Customer(),
        "cargos": [CargoRecord(title="Default cargo")],
        "order_reference": "ORD-TEST01",
    }
    data.update(overrides)
    return OrderRecord(**data)


class TestSchemaValidatingSink:
    def test_accepts_valid_order(self, sink):
        submission = sink.create_order(_order())
        assert submission.order_reference == "ORD-TEST01"
        assert submission.order.cargos[0].title == "Default cargo"
        assert submission.submitted_at == FIXED_NOW

    def test_output_is_last_accepted_order(self, sink):
        assert sink.get_output() is None
        sink.create_order(_order(order_reference="A"))
        second = sink.create_order(_order(order_reference="B"))
        assert sink.get_output() == second

    def test_rejects_order_that_bypassed_validation(self, sink):
        # model_construct skips validation, like a hand-built record would
        broken = OrderRecord.model_construct(
            attachment_filenames=[],
            customer=Customer(),
            loading_locations=[],
            destination_locations=[],
            cargos=[],
            order_reference="ORD-EMPTY",
            freight_price=0.0,
            freight_currency="EUR",
            transport_numbers="",
            comment="",
            incoterms="CFR",
        )
        with pytest.raises(OrderSubmissionError, match="ORD-EMPTY"):
            sink.create_order(broken)
        assert sink.get_output() is None

    def test_default_clock_is_utc(self):
        submission = SchemaValidatingSink().create_order(_order())
        assert submission.submitted_at.utcoffset() is not None
