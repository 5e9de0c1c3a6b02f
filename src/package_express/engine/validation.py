"""
Standard package limits.

Only upper limits are enforced: zero and negative values pass both checks.
"""
import logging
from typing import Optional

from ..config.settings import get_settings, Settings
from .models import ValidationResult

logger = logging.getLogger(__name__)

TOO_HEAVY_MESSAGE = "Package too heavy to be shipped via Package Express. Have a good day."
TOO_BIG_MESSAGE = "Package too big to be shipped via Package Express."


class StandardValidationService:
    """Checks weight and combined dimensions against the configured maximums."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    @property
    def max_weight(self) -> float:
        return self.settings.max_weight

    @property
    def max_dimensions(self) -> float:
        return self.settings.max_dimensions

    def validate_weight(self, weight: float) -> ValidationResult:
        if weight > self.max_weight:
            logger.debug("Weight %s exceeds limit %s", weight, self.max_weight)
            return ValidationResult.fail(TOO_HEAVY_MESSAGE)
        return ValidationResult.ok()

    def validate_dimensions(self, width: float, height: float, length: float) -> ValidationResult:
        total = width + height + length
        if total > self.max_dimensions:
            logger.debug("Dimensions %s exceed limit %s", total, self.max_dimensions)
            return ValidationResult.fail(TOO_BIG_MESSAGE)
        return ValidationResult.ok()
