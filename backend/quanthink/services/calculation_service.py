"""
QuanThink Backend: Calculation Service
=======================================

What:  Business layer for calculations.
How:   Delegates every operation to its CalculationStore and converts
       stored rows into CalculationResponse models.
Who:   Built per request by quanthink.dependencies; called by the
       /calculations routes.
"""

import logging
from typing import List, Optional

from quanthink.schemas.calculation import (
    CalculationCreate,
    CalculationResponse,
    CalculationUpdate,
)
from quanthink.stores.calculation_store import CalculationStore

logger = logging.getLogger(__name__)


class CalculationService:
    """
    CRUD orchestration for calculations.

    Calculations carry no rule beyond the store's own (unique id assigned
    at creation), so each method is a single store call.
    """

    def __init__(self, store: CalculationStore):
        self.store = store

    async def get_all_calculations(self) -> List[CalculationResponse]:
        records = await self.store.get_all()
        return [CalculationResponse.model_validate(record) for record in records]

    async def get_calculation_by_id(self, calculation_id: int) -> Optional[CalculationResponse]:
        record = await self.store.get_by_id(calculation_id)
        if record is None:
            return None
        return CalculationResponse.model_validate(record)

    async def create_calculation(self, data: CalculationCreate) -> CalculationResponse:
        record = await self.store.create(data.model_dump())
        return CalculationResponse.model_validate(record)

    async def update_calculation(
        self, calculation_id: int, data: CalculationUpdate
    ) -> Optional[CalculationResponse]:
        """Full-record update. Returns None when the id is unknown."""
        record = await self.store.update(calculation_id, data.model_dump())
        if record is None:
            logger.info("Update skipped: calculation %s does not exist", calculation_id)
            return None
        return CalculationResponse.model_validate(record)

    async def delete_calculation(self, calculation_id: int) -> None:
        await self.store.delete(calculation_id)
