"""
Ledger walkthrough: buys, partial fills, FIFO cost basis on sells, and a report.

Run from repo root after `pip install -e .`: python examples/ledger_walkthrough.py
"""

from __future__ import annotations

import logging

from ledger_core import AccountLedger, Order
from reporting import positions_frame, print_report, transactions_frame


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    initial_cash = 10_000.0
    ledger = AccountLedger(initial_cash)

    orders = [
        Order.buy("AAPL", 10, 10.0),
        Order.buy("AAPL", 10, 40.0),
        Order.sell("AAPL", 5, 60.0),
        Order.buy("MSFT", 1_000, 50.0),  # partial: capped by cash
        Order.sell("TSLA", 3, 200.0),  # never bought: zero fill
        Order.sell("AAPL", 10, 60.0),
        Order.buy("AAPL", 5, 45.0),
    ]
    for order in orders:
        filled = ledger.submit_order(order)
        print(f"{order.kind.value:<4} {order.quantity:>5} {order.name:<5} @ {order.price:>7.2f} -> filled {filled}")
        for pos in ledger.get_positions():
            print(f"    {pos.name}: {pos.quantity} @ {pos.price:.4f}")

    print()
    print(positions_frame(ledger).to_string(index=False))
    print()
    print(transactions_frame(ledger).to_string(index=False))
    print()
    print_report(ledger, initial_cash=initial_cash)


if __name__ == "__main__":
    main()
