from stockmetrics.services.metrics_service import DashboardMetricsService
from stockmetrics.services.store import SqlTransactionStore, TransactionStore

__all__ = [
    "DashboardMetricsService",
    "SqlTransactionStore",
    "TransactionStore",
]
