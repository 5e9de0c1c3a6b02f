"""
Quote Engine - validation and cost calculation with traceability.

Shared by the HTTP API, the Streamlit UI and batch quoting. The console
session drives the same services step by step so it can stop prompting
as soon as the weight is rejected.
"""
import logging
from typing import Optional

from ..config.settings import get_settings, Settings
from .calculation import StandardCalculationService
from .interfaces import CalculationService, ValidationService
from .models import Package, Quote, QUOTED, REJECTED
from .validation import StandardValidationService

logger = logging.getLogger(__name__)


class QuoteEngine:
    """
    Resolves a shipping quote for a package.

    Resolution order:
    1. Weight check against max_weight (reject on failure)
    2. Combined dimension check against max_dimensions (reject on failure)
    3. Apply the cost formula to the four measurements
    """

    def __init__(
        self,
        validation_service: Optional[ValidationService] = None,
        calculation_service: Optional[CalculationService] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.validation_service = validation_service or StandardValidationService(self.settings)
        self.calculation_service = calculation_service or StandardCalculationService(self.settings)

    def calculate(self, package: Package) -> Quote:
        """
        Quote a package with full traceability.

        Args:
            package: Package dataclass with weight and dimensions

        Returns:
            Quote with status "quoted" and the unrounded total, or status
            "rejected" and the validation message
        """
        quote = Quote(package=package, status=QUOTED)

        # Label the trace with the values the services apply, falling back to settings
        max_weight = getattr(self.validation_service, 'max_weight', self.settings.max_weight)
        max_dimensions = getattr(self.validation_service, 'max_dimensions', self.settings.max_dimensions)
        cost_divisor = getattr(self.calculation_service, 'cost_divisor', self.settings.cost_divisor)

        weight_check = self.validation_service.validate_weight(package.weight)
        if not weight_check.valid:
            quote.add_trace("Weight Check", f"Exceeds {max_weight:g} limit", f"{package.weight:g}")
            return self._reject(quote, weight_check.error)
        quote.add_trace("Weight Check", f"Within {max_weight:g} limit", f"{package.weight:g}")

        size_check = self.validation_service.validate_dimensions(package.width, package.height, package.length)
        if not size_check.valid:
            quote.add_trace("Size Check", f"Exceeds {max_dimensions:g} limit", f"{package.dimension_total:g}")
            return self._reject(quote, size_check.error)
        quote.add_trace("Size Check", f"Within {max_dimensions:g} limit", f"{package.dimension_total:g}")

        quote.total = self.calculation_service.calculate_shipping_cost(
            package.weight, package.width, package.height, package.length
        )
        quote.add_trace(
            "Cost",
            f"{package.width:g} × {package.height:g} × {package.length:g} × {package.weight:g} / {cost_divisor:g}",
            quote.formatted_total(),
        )
        logger.debug("Quoted %s at %s", package, quote.total)
        return quote

    def _reject(self, quote: Quote, error: Optional[str]) -> Quote:
        quote.status = REJECTED
        quote.error = error
        logger.debug("Rejected %s: %s", quote.package, error)
        return quote
