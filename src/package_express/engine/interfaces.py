"""
Service roles used by the quote workflow.

Each role has one default implementation; any object with the same
methods can be swapped in (tests use scripted input, for example).
"""
from typing import Protocol

from .models import ValidationResult


class InputService(Protocol):
    def get_input(self, prompt: str) -> float:
        """Prompt until a numeric value is supplied and return it."""
        ...


class ValidationService(Protocol):
    def validate_weight(self, weight: float) -> ValidationResult:
        ...

    def validate_dimensions(self, width: float, height: float, length: float) -> ValidationResult:
        ...


class CalculationService(Protocol):
    def calculate_shipping_cost(self, weight: float, width: float, height: float, length: float) -> float:
        ...
