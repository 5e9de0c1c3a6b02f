"""
Console Input Service - reads numeric values from an interactive session.
"""
import logging
import math
import re
from typing import Callable, Optional

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Invalid input. Please enter a numeric value."

# sign, integer part with optional group separators, remainder
_GROUPED_INTEGER = re.compile(r"([+-]?)([\d,]*)(.*)", re.DOTALL)


def parse_number(text: Optional[str]) -> Optional[float]:
    """
    Parse one line of user input as a finite real number.

    Returns None when the text is not a plain decimal or exponent number.
    Surrounding whitespace is ignored. Commas are group separators and are
    only allowed before the decimal point or exponent ("1,000" -> 1000,
    "1,5" -> 15). nan/inf spellings and Python's digit-grouping
    underscores are rejected.
    """
    if text is None:
        return None
    text = text.strip()
    if not text or '_' in text:
        return None
    match = _GROUPED_INTEGER.match(text)
    sign, integer, rest = match.groups()
    if ',' in rest:
        return None
    try:
        value = float(sign + integer.replace(',', '') + rest)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


class ConsoleInputService:
    """Prompts on the console until the user enters a number."""

    def __init__(
        self,
        reader: Optional[Callable[[], str]] = None,
        writer: Optional[Callable[[str], None]] = None,
    ):
        self.reader = reader or input
        self.writer = writer or print

    def get_input(self, prompt: str) -> float:
        # No retry limit; EOFError and KeyboardInterrupt propagate to the caller.
        while True:
            self.writer(prompt)
            raw = self.reader()
            value = parse_number(raw)
            if value is not None:
                return value
            logger.debug("Rejected non-numeric input %r for prompt %r", raw, prompt)
            self.writer(INVALID_INPUT_MESSAGE)
