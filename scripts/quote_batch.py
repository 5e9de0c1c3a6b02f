#!/usr/bin/env python
"""
Quote every package in a CSV file.

Usage:
    python scripts/quote_batch.py packages.csv

Writes <name>_quotes.csv next to the input.
"""
import sys
from pathlib import Path

# Add src to path
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from package_express.data.batch_quotes import quote_csv


def main():
    if len(sys.argv) != 2:
        print(__doc__)
        sys.exit(2)

    input_path = Path(sys.argv[1])
    if not input_path.exists():
        print(f"ERROR: {input_path} not found.")
        sys.exit(1)

    try:
        results = quote_csv(input_path)
    except ValueError as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    output_path = input_path.with_name(f"{input_path.stem}_quotes.csv")
    results.to_csv(output_path, index=False)

    print(f"Quoted {len(results)} packages -> {output_path}")
    for status, count in results['status'].value_counts().items():
        print(f"  {status}: {count}")


if __name__ == "__main__":
    main()
