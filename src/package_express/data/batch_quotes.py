"""
Batch Quotes - quotes every package in a CSV or DataFrame.

Each row is quoted independently; a malformed row is marked "invalid"
instead of stopping the batch.
"""
import pandas as pd
from pathlib import Path
from typing import Optional

from ..engine import QuoteEngine, Package
from ..services.console_input import parse_number, INVALID_INPUT_MESSAGE

REQUIRED_COLUMNS = ['weight', 'width', 'height', 'length']
INVALID = "invalid"


def quote_frame(df: pd.DataFrame, engine: Optional[QuoteEngine] = None) -> pd.DataFrame:
    """
    Quote each row of a frame of packages.

    Args:
        df: DataFrame with weight, width, height and length columns
        engine: Optional engine override

    Returns:
        Copy of the frame with status, quote and message columns added
    """
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {', '.join(missing)}")

    engine = engine or QuoteEngine()

    statuses, totals, messages = [], [], []
    for _, row in df.iterrows():
        values = [parse_number(str(row[c])) for c in REQUIRED_COLUMNS]
        if any(v is None for v in values):
            statuses.append(INVALID)
            totals.append(None)
            messages.append(INVALID_INPUT_MESSAGE)
            continue

        quote = engine.calculate(Package(*values))
        statuses.append(quote.status)
        totals.append(quote.total)
        messages.append(quote.error if quote.error else quote.formatted_total())

    result = df.copy()
    result['status'] = statuses
    result['quote'] = pd.Series(totals, index=df.index, dtype='float64')
    result['message'] = messages
    return result


def quote_csv(path: Path, engine: Optional[QuoteEngine] = None) -> pd.DataFrame:
    """Read a CSV of packages and quote every row."""
    df = pd.read_csv(path, dtype=str)
    df.columns = [c.strip().lower() for c in df.columns]
    return quote_frame(df, engine)
