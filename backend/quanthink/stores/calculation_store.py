"""Persistence for calculations."""

from quanthink.models.calculation import Calculation
from quanthink.stores.base import EntityStore


class CalculationStore(EntityStore[Calculation]):
    model = Calculation
