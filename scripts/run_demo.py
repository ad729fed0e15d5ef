#!/usr/bin/env python
"""
qlkit Demo Script

This script demonstrates the lazy recalculation workflow:
1. Set the evaluation date and a quote-driven flat curve
2. Build a fixed-rate bond and attach a discounting engine
3. Print prices, accrued interest and yield
4. Move the market quote and watch the bond reprice on demand
5. Export the bond's cash flow table

Usage:
    python run_demo.py [--rate RATE] [--coupon COUPON] [--output-dir OUTPUT_DIR]
"""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from qlkit import (
    Compounding,
    Conventions,
    DayCounter,
    DiscountingBondEngine,
    FixedRateBond,
    FlatCurve,
    Frequency,
    Observer,
    Settings,
    SimpleQuote,
    USDCurrency,
    Money,
)
from qlkit.cashflows import CashFlowClassifier


class PriceWatcher(Observer):
    """Reports every invalidation of the bond."""

    def __init__(self, name: str):
        super().__init__()
        self.name = name
        self.notifications = 0

    def update(self) -> None:
        self.notifications += 1
        print(f"  [{self.name}] invalidated (notification #{self.notifications})")


def print_bond_summary(bond: FixedRateBond, day_counter: DayCounter) -> None:
    """Print price analytics of a bond."""
    usd = USDCurrency()
    y = bond.yield_rate(day_counter, Compounding.COMPOUNDED, Frequency.SEMIANNUAL)
    print(f"  Settlement date:  {bond.settlement_date()}")
    print(f"  NPV:              {Money(bond.npv(), usd)}")
    print(f"  Dirty price:      {bond.dirty_price():.6f}")
    print(f"  Clean price:      {bond.clean_price():.6f}")
    print(f"  Accrued amount:   {bond.accrued_amount():.6f}")
    print(f"  Yield (s.a.):     {y * 100:.4f}%")


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="qlkit Demo")
    parser.add_argument("--rate", type=float, default=0.045, help="Flat curve rate")
    parser.add_argument("--coupon", type=float, default=0.04, help="Bond coupon rate")
    parser.add_argument(
        "--output-dir",
        type=str,
        default="./output",
        help="Output directory for the cash flow table"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    valuation_date = date(2024, 1, 15)
    Settings.instance().evaluation_date = valuation_date

    print("=" * 60)
    print("QLKIT DEMO")
    print(f"Valuation Date: {valuation_date}")
    print("=" * 60)

    # Step 1: Market data
    conventions = Conventions.usd_treasury()
    rate = SimpleQuote(args.rate)
    curve = FlatCurve(None, rate, conventions.day_counter,
                      Compounding.COMPOUNDED, Frequency.SEMIANNUAL)

    # Step 2: Instrument
    bond = FixedRateBond.from_conventions(
        conventions, 100.0, valuation_date, date(2034, 1, 15), args.coupon
    )
    bond.set_pricing_engine(DiscountingBondEngine(curve))
    watcher = PriceWatcher("10Y bond")
    watcher.register_with(bond)

    classified = CashFlowClassifier.classify(bond.cashflows)
    print(f"\nBond: {len(classified.coupons)} coupons, "
          f"{len(classified.redemptions)} redemption, maturity {bond.maturity_date}")

    # Step 3: Prices
    print(f"\nCurve at {args.rate * 100:.2f}%:")
    print_bond_summary(bond, conventions.day_counter)

    # Step 4: Market move
    print("\nCurve moves +50bp:")
    rate.set_value(args.rate + 0.005)
    print(f"  Bond calculated: {bond.calculated}")
    print_bond_summary(bond, conventions.day_counter)

    print("\nEvaluation date moves to 2024-04-15:")
    Settings.instance().evaluation_date = date(2024, 4, 15)
    print_bond_summary(bond, conventions.day_counter)

    # Step 5: Cash flow table
    df = bond.cashflow_frame()
    print("\nCash flows:")
    print(df.to_string(index=False))

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / "bond_cashflows.csv"
    df.to_csv(path, index=False)
    print(f"\nExported cash flows to {path}")

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)


if __name__ == "__main__":
    main()
