from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from stockmetrics.core.errors import load_or_503
from stockmetrics.dependencies import get_metrics_service
from stockmetrics.schemas.inventory import InventoryValuation, LowStockItem, StockLevel
from stockmetrics.services.metrics_service import DashboardMetricsService

router = APIRouter(prefix="/inventory", tags=["Inventory"])


@router.get("/stock-levels", response_model=List[StockLevel])
async def stock_levels(service: DashboardMetricsService = Depends(get_metrics_service)):
    return await load_or_503(service.get_stock_levels())


@router.get("/stock-levels/{item_id}", response_model=StockLevel)
async def item_stock_level(
    item_id: int,
    service: DashboardMetricsService = Depends(get_metrics_service),
):
    try:
        return await load_or_503(service.get_item_stock_level(item_id))
    except LookupError:
        raise HTTPException(status_code=404, detail="Item not found.")


@router.get("/low-stock", response_model=List[LowStockItem])
async def low_stock_items(service: DashboardMetricsService = Depends(get_metrics_service)):
    return await load_or_503(service.get_low_stock_items())


@router.get("/out-of-stock", response_model=List[LowStockItem])
async def out_of_stock_items(service: DashboardMetricsService = Depends(get_metrics_service)):
    return await load_or_503(service.get_out_of_stock_items())


@router.get("/valuation", response_model=InventoryValuation)
async def inventory_valuation(
    method: str = Query("FIFO", description="FIFO or LIFO"),
    service: DashboardMetricsService = Depends(get_metrics_service),
):
    try:
        return await load_or_503(service.get_inventory_valuation(method))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))


__all__ = ["router"]
