"""Engine subpackage - package limits, cost formula and quote resolution."""
from .quote_engine import QuoteEngine
from .models import Package, Quote, ValidationResult

__all__ = ['QuoteEngine', 'Package', 'Quote', 'ValidationResult']
