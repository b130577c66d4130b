"""Tests for the order HTTP endpoints."""

import pytest

from order_intake.services.order_sink import OrderSubmissionError


class TestClassifyEndpoint:
    async def test_order_document(self, client):
        response = await client.post(
            "/api/v1/orders/classify",
            json={"lines": ["Shipment Confirmation", "Consignee: Acme"]},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["handled"] is True
        assert data["matched_keywords"] == ["consignee", "shipment"]

    async def test_unrelated_document(self, client):
        response = await client.post(
            "/api/v1/orders/classify", json={"lines": ["Random unrelated text"]}
        )
        assert response.json() == {"handled": False, "matched_keywords": []}

    async def test_missing_lines_is_rejected(self, client):
        response = await client.post("/api/v1/orders/classify", json={})
        assert response.status_code == 422


class TestExtractEndpoint:
    async def test_extracts_and_submits(self, client, transport_order_lines):
        response = await client.post(
            "/api/v1/orders/extract",
            json={"lines": transport_order_lines, "attachment_filename": "order.pdf"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["order_reference"] == "NL-2024-0042"
        order = data["order"]
        assert order["attachment_filenames"] == ["order.pdf"]
        assert order["customer"]["side"] == "sender"
        assert order["incoterms"] == "DAP"
        assert len(order["cargos"]) == 2
        assert order["loading_locations"][0]["time"]["datetime_to"] == "2024-01-10T10:00:00+00:00"

    async def test_unrecognized_document(self, client):
        response = await client.post(
            "/api/v1/orders/extract", json={"lines": ["Random unrelated text"]}
        )
        assert response.status_code == 422
        assert response.json()["detail"] == "Document format not recognized"

    async def test_force_skips_gate(self, client):
        response = await client.post(
            "/api/v1/orders/extract",
            json={"lines": ["Random unrelated text"], "force": True},
        )
        assert response.status_code == 200
        order = response.json()["order"]
        assert order["order_reference"] == "ORD-A1B2C3"
        assert order["cargos"][0]["title"] == "Default cargo"

    async def test_sink_rejection_is_bad_gateway(self, client, sink, monkeypatch):
        def reject(order):
            raise OrderSubmissionError("Order ORD-A1B2C3 failed schema validation")

        monkeypatch.setattr(sink, "create_order", reject)
        response = await client.post(
            "/api/v1/orders/extract", json={"lines": ["Transport order"]}
        )
        assert response.status_code == 502
        assert "ORD-A1B2C3" in response.json()["detail"]

    async def test_request_id_header(self, client):
        response = await client.post(
            "/api/v1/orders/classify",
            json={"lines": ["order"]},
            headers={"X-Request-ID": "abc123"},
        )
        assert response.headers["X-Request-ID"] == "abc123"
