"""
Public API Routes (No Authentication Required)

Catalog for the landing page and booking form.
"""
from fastapi import APIRouter, Depends

from app.schemas.vehicle import CatalogResponseSchema
from app.services.catalog_service import CatalogService, get_catalog_service

router = APIRouter()


@router.get(
    "/vehicles",
    response_model=CatalogResponseSchema,
    summary="Public vehicle catalog",
    description="Available vehicles. Falls back to three showcase vehicles when the store is empty or unreachable."
)
async def get_public_vehicles(
    service: CatalogService = Depends(get_catalog_service)
):
    """
    Get the vehicles shown on the landing page.

    **Never empty.** Check `source`:
    - `store`: vehicles from the database
    - `fallback`: showcase vehicles; `storeError` is set when the store could not be read
    """
    return await service.get_public_catalog()
