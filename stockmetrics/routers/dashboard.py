from typing import List

from fastapi import APIRouter, Depends, Query

from stockmetrics.core.constants import DEFAULT_PERIOD
from stockmetrics.core.errors import load_or_503
from stockmetrics.core.periods import PeriodToken
from stockmetrics.dependencies import get_metrics_service
from stockmetrics.schemas.dashboard import DashboardOverview, MetricsSnapshot, TrendBucket
from stockmetrics.schemas.inventory import TransactionRecord
from stockmetrics.services.metrics_service import DashboardMetricsService

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])

_PERIOD_QUERY = Query(PeriodToken(DEFAULT_PERIOD), description="Reporting period token")


@router.get("/metrics", response_model=MetricsSnapshot)
async def dashboard_metrics(
    period: PeriodToken = _PERIOD_QUERY,
    service: DashboardMetricsService = Depends(get_metrics_service),
):
    return await load_or_503(service.get_dashboard_metrics(period))


@router.get("/trends", response_model=List[TrendBucket])
async def inventory_trends(
    period: PeriodToken = _PERIOD_QUERY,
    service: DashboardMetricsService = Depends(get_metrics_service),
):
    return await load_or_503(service.get_inventory_trends(period))


@router.get("/overview", response_model=DashboardOverview)
async def dashboard_overview(
    period: PeriodToken = _PERIOD_QUERY,
    service: DashboardMetricsService = Depends(get_metrics_service),
):
    return await load_or_503(service.get_dashboard_overview(period))


@router.get("/recent-transactions", response_model=List[TransactionRecord])
async def recent_transactions(
    limit: int = Query(5, ge=1, le=100, description="Max records to return"),
    service: DashboardMetricsService = Depends(get_metrics_service),
):
    return await load_or_503(service.get_recent_transactions(limit))


__all__ = ["router"]
