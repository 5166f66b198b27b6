from stockmetrics.services.metrics_service import DashboardMetricsService
from stockmetrics.services.store import SqlTransactionStore


def get_store():
    return SqlTransactionStore()


def get_metrics_service():
    return DashboardMetricsService(get_store())


__all__ = ["get_metrics_service", "get_store"]
