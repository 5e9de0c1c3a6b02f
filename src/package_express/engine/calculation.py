"""Shipping cost formula."""
from typing import Optional

from ..config.settings import get_settings, Settings


class StandardCalculationService:
    """cost = (width * height * length * weight) / divisor, unrounded."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    @property
    def cost_divisor(self) -> float:
        return self.settings.cost_divisor

    def calculate_shipping_cost(self, weight: float, width: float, height: float, length: float) -> float:
        return (width * height * length * weight) / self.cost_divisor
