"""
Interactive console session for Package Express.

Usage:
    package-express
    python -m package_express
"""
import sys
from typing import Callable

from .config.settings import get_settings
from .engine.calculation import StandardCalculationService
from .engine.interfaces import CalculationService, InputService, ValidationService
from .engine.models import format_currency
from .engine.validation import StandardValidationService
from .logging_config import setup_logging
from .services.console_input import ConsoleInputService

WELCOME_MESSAGE = "Welcome to Package Express. Please follow the instructions below."
THANK_YOU_MESSAGE = "Thank you!"
QUOTE_MESSAGE = "Your estimated total for shipping this package is: {total}"


def process_shipping_quote(
    input_service: InputService,
    validation_service: ValidationService,
    calculation_service: CalculationService,
    writer: Callable[[str], None] = print,
) -> bool:
    """
    Run one quote session. Returns True when a quote was shown and False
    when the package was rejected; both are normal endings.
    """
    writer(WELCOME_MESSAGE)

    weight = input_service.get_input("Please enter the package weight:")
    weight_check = validation_service.validate_weight(weight)
    if not weight_check.valid:
        writer(weight_check.error)
        return False

    width = input_service.get_input("Please enter the package width:")
    height = input_service.get_input("Please enter the package height:")
    length = input_service.get_input("Please enter the package length:")

    size_check = validation_service.validate_dimensions(width, height, length)
    if not size_check.valid:
        writer(size_check.error)
        return False

    quote = calculation_service.calculate_shipping_cost(weight, width, height, length)
    writer(QUOTE_MESSAGE.format(total=format_currency(quote)))
    writer(THANK_YOU_MESSAGE)
    return True


def main() -> int:
    settings = get_settings()
    setup_logging(settings.log_level)

    try:
        process_shipping_quote(
            ConsoleInputService(),
            StandardValidationService(settings),
            StandardCalculationService(settings),
        )
    except KeyboardInterrupt:
        print("\nSession cancelled.")
        return 130
    except EOFError:
        print("\nNo more input. Session ended.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
