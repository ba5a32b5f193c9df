from fastapi import APIRouter, Depends, HTTPException, status

from app.adapters.store_adapter_interface import StoreError
from app.schemas.dashboard import DashboardStatsSchema
from app.services.dashboard_service import DashboardService, get_dashboard_service

router = APIRouter()


@router.get("/", response_model=DashboardStatsSchema, summary="Dashboard statistics")
async def get_dashboard(service: DashboardService = Depends(get_dashboard_service)):
    """
    Vehicle and booking counts plus confirmed revenue.
    """
    try:
        return await service.get_stats()
    except StoreError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=e.message
        )
