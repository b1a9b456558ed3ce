import json
from unittest.mock import MagicMock, patch

import pandas as pd
import pytest
import requests

from retail_insights import data_handler, settings
from retail_insights.demo import demo_bundle


@pytest.fixture
def bundle():
    return demo_bundle(seed=11)


def test_save_outputs_writes_csv_and_json(bundle, output_dir):
    written = data_handler.save_outputs(bundle)

    assert set(written) == {"csv", "json"}
    assert written["csv"].parent == output_dir
    assert written["csv"].name.startswith("business_summary_")

    frame = pd.read_csv(written["csv"])
    assert len(frame) == 1
    assert frame.loc[0, "totalOrders"] == 100
    assert frame.loc[0, "salesRecords"] == 100
    assert "topProducts" not in frame.columns

    payload = json.loads(written["json"].read_text(encoding="utf-8"))
    assert payload["summary"]["totalOrders"] == 100
    assert payload["dataStats"] == {"salesRecords": 100, "inventoryItems": 6, "reviewCount": 50}
    assert len(payload["sales"]) == 100


def test_json_output_can_be_switched_off(bundle, output_dir, monkeypatch):
    monkeypatch.setattr(settings, "SAVE_JSON_OUTPUT", False)

    assert set(data_handler.save_outputs(bundle)) == {"csv"}


def test_payload_uses_camel_case(bundle):
    payload = data_handler.build_payload(bundle)

    assert set(payload) == {
        "summary",
        "sales",
        "inventory",
        "reviews",
        "dataStats",
        "generatedAt",
    }
    assert "lowStockItems" in payload["summary"]
    assert payload["reviews"][0]["Review"] == bundle.reviews[0].review_text


class TestWebhook:
    def test_skipped_without_url(self, bundle, monkeypatch):
        monkeypatch.setattr(settings, "WEBHOOK_URL", None)

        with patch("retail_insights.data_handler.requests.post") as mock_post:
            assert data_handler.post_to_webhook(bundle) is False
        mock_post.assert_not_called()

    def test_posts_payload(self, bundle):
        response = MagicMock()
        with patch(
            "retail_insights.data_handler.requests.post", return_value=response
        ) as mock_post:
            assert data_handler.post_to_webhook(bundle, url="https://hooks.example.com/x") is True

        mock_post.assert_called_once()
        args, kwargs = mock_post.call_args
        assert args[0] == "https://hooks.example.com/x"
        assert kwargs["json"]["summary"]["totalOrders"] == 100
        response.raise_for_status.assert_called_once()

    def test_request_errors_are_reported(self, bundle):
        with patch(
            "retail_insights.data_handler.requests.post",
            side_effect=requests.exceptions.ConnectionError("down"),
        ):
            assert data_handler.post_to_webhook(bundle, url="https://hooks.example.com/x") is False
