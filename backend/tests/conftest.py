from datetime import datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient

from order_intake.config import Settings
from order_intake.order_extractor.pipeline import OrderAssembler
from order_intake.services.order_sink import SchemaValidatingSink

FIXED_NOW = datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)


class StubCountryResolver:
    """Country lookup with a fixed table, records every query."""

    def __init__(self, table: dict[str, str] | None = None):
        self.table = table or {"germany": "DE", "france": "FR", "poland": "PL"}
        self.queries: list[str] = []

    def resolve_iso(self, text: str) -> str | None:
        self.queries.append(text)
        lowered = text.lower()
        for name, code in self.table.items():
            if name in lowered:
                return code
        return None


@pytest.fixture
def test_settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def country_resolver() -> StubCountryResolver:
    return StubCountryResolver()


@pytest.fixture
def sink() -> SchemaValidatingSink:
    return SchemaValidatingSink(clock=lambda: FIXED_NOW)


@pytest.fixture
def assembler(test_settings, country_resolver, sink) -> OrderAssembler:
    return OrderAssembler(
        test_settings,
        country_resolver=country_resolver,
        sink=sink,
        clock=lambda: FIXED_NOW,
        random_token=lambda n: "A1B2C3D4E5"[:n],
    )


@pytest.fixture
def transport_order_lines() -> list[str]:
    """A typical road-freight transport order as extracted text."""
    return [
        "TRANSPORT ORDER",
        "",
        "Shipper: Nordlicht Logistik GmbH",
        "Shipper contact: Anna Weber",
        "Shipper address: Hafenstrasse 12, 20457 Hamburg",
        "Shipper country: Germany",
        "Consignee: Bistro Fournitures SARL",
        "Consignee contact: Luc Martin",
        "   ",
        "Loading date: 2024-01-10 08:00",
        "Delivery date: 2024-01-12",
        "Our ref: NL-2024-0042",
        "Truck: HH-NL 4711",
        "Note: Call 30 minutes before arrival",
        "Incoterms: DAP",
        "Chilled beverages      12      BX-01      1,250.50      8,400 kg",
        "Glassware      3 pcs      BX-02      420      310",
    ]


@pytest.fixture
async def client(assembler):
    from order_intake.dependencies import get_order_assembler
    from order_intake.main import app

    app.dependency_overrides[get_order_assembler] = lambda: assembler

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
