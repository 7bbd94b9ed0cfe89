"""
Dependency wiring for the FastAPI app.

Each factory builds a service around a store that owns the request's
database session. Tests swap these out via `app.dependency_overrides`.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from quanthink.database import get_db_session
from quanthink.services.calculation_service import CalculationService
from quanthink.services.user_service import UserService
from quanthink.stores.calculation_store import CalculationStore
from quanthink.stores.user_store import UserStore


def get_calculation_service(
    db: AsyncSession = Depends(get_db_session),
) -> CalculationService:
    return CalculationService(CalculationStore(db))


def get_user_service(db: AsyncSession = Depends(get_db_session)) -> UserService:
    return UserService(UserStore(db))
