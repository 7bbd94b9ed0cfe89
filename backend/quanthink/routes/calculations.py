"""
QuanThink Backend: Calculation Route Handlers
==============================================

What:  CRUD endpoints under /calculations.
How:   Each handler makes one CalculationService call and picks the status
       code. A None result becomes NotFoundError (404); StorageError and
       unexpected failures are turned into a bare 500 by the global handlers.
Who:   Called by the web client's calculation history.
"""

from typing import List

from fastapi import APIRouter, Depends, Path, Response, status

from quanthink.dependencies import get_calculation_service
from quanthink.exceptions import NotFoundError
from quanthink.schemas.calculation import (
    CalculationCreate,
    CalculationResponse,
    CalculationUpdate,
)
from quanthink.services.calculation_service import CalculationService

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/calculations", tags=["Calculations"])


@router.get(
    "",
    response_model=List[CalculationResponse],
    summary="Get all calculations",
    description="Retrieves a list of all calculations.",
)
async def get_all_calculations(
    service: CalculationService = Depends(get_calculation_service),
) -> List[CalculationResponse]:
    """Always 200; an empty store yields an empty list."""
    return await service.get_all_calculations()


@router.get(
    "/{calculation_id}",
    response_model=CalculationResponse,
    responses={
        200: {"description": "Calculation found"},
        404: {"description": "Calculation not found"},
    },
    summary="Get calculation by ID",
    description="Retrieves a calculation by ID.",
)
async def get_calculation_by_id(
    calculation_id: int = Path(description="Calculation ID"),
    service: CalculationService = Depends(get_calculation_service),
) -> CalculationResponse:
    calculation = await service.get_calculation_by_id(calculation_id)
    if calculation is None:
        raise NotFoundError(resource="calculation", resource_id=calculation_id)
    return calculation


@router.post(
    "",
    response_model=CalculationResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {"description": "Calculation created"},
        500: {"description": "Internal server error"},
    },
    summary="Create calculation",
    description="Creates a new calculation.",
)
async def create_calculation(
    calculation: CalculationCreate,
    service: CalculationService = Depends(get_calculation_service),
) -> CalculationResponse:
    return await service.create_calculation(calculation)


@router.put(
    "/{calculation_id}",
    response_model=CalculationResponse,
    responses={
        200: {"description": "Calculation updated"},
        404: {"description": "Calculation not found"},
    },
    summary="Update calculation",
    description="Updates a calculation.",
)
async def update_calculation(
    calculation: CalculationUpdate,
    calculation_id: int = Path(description="Calculation ID"),
    service: CalculationService = Depends(get_calculation_service),
) -> CalculationResponse:
    updated = await service.update_calculation(calculation_id, calculation)
    if updated is None:
        raise NotFoundError(resource="calculation", resource_id=calculation_id)
    return updated


@router.delete(
    "/{calculation_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        204: {"description": "Calculation deleted"},
        500: {"description": "Internal server error"},
    },
    summary="Delete calculation",
    description="Deletes a calculation by ID.",
)
async def delete_calculation(
    calculation_id: int = Path(description="Calculation ID"),
    service: CalculationService = Depends(get_calculation_service),
) -> Response:
    """
    Idempotent: deleting an id that does not exist also returns 204.
    """
    await service.delete_calculation(calculation_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
