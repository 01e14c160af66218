"""
Tests for the SePay payment webhook and transaction listing.

Run with: pytest backend/tests/test_webhook.py -v
"""
from decimal import Decimal
from unittest.mock import MagicMock, patch

import requests

from backend.core.db import list_transactions
from tests.conftest import make_webhook_payload


WEBHOOK_URL = "/api/sepay/webhook"


class TestWebhookContract:
    def test_valid_payload(self, client, no_zalo):
        resp = client.post(WEBHOOK_URL, json=make_webhook_payload())
        assert resp.status_code == 200
        data = resp.json()
        assert data == {"success": True, "message": "Webhook received", "transactionId": 92704}

    def test_missing_id(self, client, no_zalo):
        payload = make_webhook_payload()
        del payload["id"]
        resp = client.post(WEBHOOK_URL, json=payload)
        assert resp.status_code == 400
        assert resp.json() == {"error": "Invalid webhook data"}

    def test_non_object_body(self, client, no_zalo):
        resp = client.post(WEBHOOK_URL, json=[1, 2, 3])
        assert resp.status_code == 400

    def test_malformed_json(self, client, no_zalo):
        resp = client.post(WEBHOOK_URL, content=b"{not json", headers={"Content-Type": "application/json"})
        assert resp.status_code == 400

    def test_wrong_method(self, client):
        for method in ("get", "put", "delete"):
            resp = client.request(method.upper(), WEBHOOK_URL)
            assert resp.status_code == 405
            assert resp.json() == {"error": "Method not allowed"}

    def test_storage_failure_returns_500(self, client, no_zalo):
        with patch("backend.api.routers.webhook.create_transaction", side_effect=RuntimeError("disk full")):
            resp = client.post(WEBHOOK_URL, json=make_webhook_payload())
        assert resp.status_code == 500
        assert resp.json() == {"success": False, "error": "disk full"}


class TestWebhookPersistence:
    def test_transaction_stored(self, client, no_zalo):
        client.post(WEBHOOK_URL, json=make_webhook_payload(amount=250000))

        rows = list_transactions()
        assert len(rows) == 1
        assert rows[0]["sepay_id"] == "92704"
        assert rows[0]["transfer_amount"] == Decimal("250000")
        assert rows[0]["order_number"] == "ORD-104"

    def test_listing_endpoint_filters_by_order(self, client, no_zalo):
        client.post(WEBHOOK_URL, json=make_webhook_payload(sepay_id=1, description="ORD7"))
        client.post(WEBHOOK_URL, json=make_webhook_payload(sepay_id=2, description="no code"))

        resp = client.get("/api/transactions", params={"order_number": "ORD-7"})
        assert resp.status_code == 200
        data = resp.json()
        assert len(data) == 1
        assert data[0]["sepay_id"] == "1"
        assert data[0]["transfer_amount"] == 150000

        assert len(client.get("/api/transactions").json()) == 2


class TestPaymentNotification:
    def test_sends_acknowledgement_when_configured(self, client, zalo_settings):
        mock_resp = MagicMock()
        mock_resp.json.return_value = {"ok": True}
        with patch("backend.core.zalo.requests.post", return_value=mock_resp) as mock_post:
            resp = client.post(WEBHOOK_URL, json=make_webhook_payload())

        assert resp.status_code == 200
        sent = mock_post.call_args.kwargs["json"]
        assert sent["send_to_groupid"] == "group-1"
        assert "ORD-104" in sent["message"]
        assert "150.000 ₫" in sent["message"]

    def test_delivery_failure_does_not_fail_webhook(self, client, zalo_settings):
        with patch("backend.core.zalo.requests.post", side_effect=requests.ConnectionError("down")):
            resp = client.post(WEBHOOK_URL, json=make_webhook_payload())
        assert resp.status_code == 200
        assert resp.json()["success"] is True

    def test_skipped_when_unconfigured(self, client, no_zalo):
        with patch("backend.core.zalo.requests.post") as mock_post:
            client.post(WEBHOOK_URL, json=make_webhook_payload())
        mock_post.assert_not_called()
