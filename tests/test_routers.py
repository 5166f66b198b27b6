import unittest
from datetime import timezone
from unittest.mock import patch

from fastapi.testclient import TestClient

from fakes import NOW, InMemoryStore, category, days_ago, item, make_tx

from stockmetrics.dependencies import get_metrics_service
from stockmetrics.main import app
from stockmetrics.routers import health
from stockmetrics.services.metrics_service import DashboardMetricsService


class RouterTest(unittest.TestCase):
    def setUp(self):
        self.store = InMemoryStore(
            transactions=[
                make_tx(1, 1, "stock_in", 20, 200, when=NOW.replace(hour=9)),
                make_tx(2, 1, "stock_out", 5, 100, when=NOW.replace(hour=14)),
                make_tx(3, 2, "stock_in", 30, 90, when=days_ago(40)),
            ],
            items=[
                item(1, "Beans", reorder_point=20, category_id=1),
                item(2, "Rice", reorder_point=5),
            ],
            categories=[category(1, "Pantry")],
        )
        app.dependency_overrides[get_metrics_service] = lambda: DashboardMetricsService(
            self.store,
            tz=timezone.utc,
            clock=lambda: NOW,
        )
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()

    def test_metrics_are_camel_case(self):
        response = self.client.get("/dashboard/metrics", params={"period": "today"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json(),
            {
                "totalStockIn": 20,
                "totalStockOut": 5,
                "revenueSpentOnStockIn": 200,
                "revenueEarnedFromStockOut": 100,
            },
        )

    def test_trends(self):
        response = self.client.get("/dashboard/trends", params={"period": "today"})
        self.assertEqual(response.status_code, 200)
        payload = response.json()
        self.assertEqual([bucket["period"] for bucket in payload], ["09:00", "14:00"])
        self.assertEqual(payload[0]["stockIn"], 20)
        self.assertEqual(payload[1]["revenueOut"], 100)

    def test_overview(self):
        response = self.client.get("/dashboard/overview", params={"period": "last-3-months"})
        self.assertEqual(response.status_code, 200)
        payload = response.json()
        self.assertEqual(payload["label"], "Last 3 Months")
        self.assertEqual(payload["metrics"]["totalStockIn"], 50)

    def test_invalid_period_is_rejected(self):
        response = self.client.get("/dashboard/metrics", params={"period": "forever"})
        self.assertEqual(response.status_code, 422)

    def test_store_failure_is_single_error(self):
        self.store.fail_transactions = True
        response = self.client.get("/dashboard/metrics", params={"period": "today"})
        self.assertEqual(response.status_code, 503)
        self.assertEqual(response.json(), {"detail": "Failed to load dashboard data."})

    def test_stock_levels(self):
        response = self.client.get("/inventory/stock-levels")
        self.assertEqual(response.status_code, 200)
        payload = response.json()
        self.assertEqual([entry["item_id"] for entry in payload], [1, 2])
        self.assertEqual(payload[0]["total_value"], 150)
        self.assertEqual(payload[0]["item"]["category"]["name"], "Pantry")
        self.assertIsNone(payload[1]["item"]["category"])

    def test_unknown_item_is_404(self):
        response = self.client.get("/inventory/stock-levels/77")
        self.assertEqual(response.status_code, 404)

    def test_low_stock(self):
        response = self.client.get("/inventory/low-stock")
        self.assertEqual(response.status_code, 200)
        payload = response.json()
        self.assertEqual([entry["id"] for entry in payload], [1])
        self.assertEqual(payload[0]["current_quantity"], 15)

    def test_valuation_rejects_unknown_method(self):
        response = self.client.get("/inventory/valuation", params={"method": "AVG"})
        self.assertEqual(response.status_code, 400)

    def test_health(self):
        with patch.object(health, "_database_status", return_value="ok"):
            response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "ok")


if __name__ == "__main__":
    unittest.main()
