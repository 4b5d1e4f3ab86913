#!/usr/bin/env python3
"""Batch-price a book of European options.

Usage
-----
    python scripts/price_book.py --input book.csv --output prices.csv
    python scripts/price_book.py --input book.csv --output prices.json

Input CSV format
----------------
    id,S,K,T,r,sigma
    1,100,105,1.0,0.05,0.20
    2,100,95,0.5,-0.01,0.25

Output
------
    CSV or JSON with columns: id, call_price, put_price, delta_call, delta_put,
    gamma, theta_call, theta_put, vega, rho_call, rho_put, parity_ok
    Rows that fail validation carry an ``error`` column instead.
"""

from __future__ import annotations
import argparse
import csv
import json
import logging
from pathlib import Path

from bspricer import validate, price_and_greeks, put_call_parity
from bspricer.config import get_settings

LOGGER = logging.getLogger("bspricer.price_book")


def price_row(row: dict, parity_tolerance: float) -> dict:
    """Price a single book row and return the result dict."""
    params = validate(
        float(row["S"]), float(row["K"]), float(row["T"]),
        float(row["r"]), float(row["sigma"]),
    )
    prices = price_and_greeks(params)
    parity = put_call_parity(params, prices, tolerance=parity_tolerance)
    return {"id": row.get("id", ""), **prices.as_dict(), "parity_ok": parity["holds"]}


def main(argv=None):
    parser = argparse.ArgumentParser(description="Batch-price a book of European options.")
    parser.add_argument("--input", required=True, help="Path to book CSV")
    parser.add_argument("--output", required=True, help="Output path (.csv or .json)")
    args = parser.parse_args(argv)

    settings = get_settings()
    logging.basicConfig(level=settings.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    with open(args.input, newline="") as f:
        rows = list(csv.DictReader(f))

    LOGGER.info("pricing %d positions", len(rows))

    results = []
    for i, row in enumerate(rows):
        try:
            results.append(price_row(row, settings.parity_tolerance))
        except (KeyError, ValueError) as e:
            LOGGER.warning("row %d (id=%s): %s", i, row.get("id", "?"), e)
            results.append({"id": row.get("id", ""), "error": str(e)})

    output_path = Path(args.output)
    if output_path.suffix == ".json":
        with open(output_path, "w") as f:
            json.dump(results, f, indent=2)
    else:
        if not results:
            LOGGER.warning("no results to write")
            return 0
        fieldnames = []
        for r in results:
            for k in r:
                if k not in fieldnames:
                    fieldnames.append(k)
        with open(output_path, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            writer.writerows(results)

    failed = sum(1 for r in results if "error" in r)
    print(f"Priced: {len(results) - failed}  |  Failed: {failed}  ->  {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
