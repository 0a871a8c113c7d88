"""
Ledger report: tabular views of positions and transactions, and a printed summary.
"""

from __future__ import annotations

import pandas as pd

from ledger_core import AccountLedger, OrderKind, PortfolioState

POSITION_COLUMNS = ["name", "quantity", "avg_price", "cost_basis"]
TRANSACTION_COLUMNS = ["seq", "kind", "name", "quantity", "price", "amount"]


def positions_frame(ledger: AccountLedger) -> pd.DataFrame:
    """One row per held security, sorted by name. cost_basis = quantity * avg_price."""
    rows = [
        {"name": p.name, "quantity": p.quantity, "avg_price": p.price, "cost_basis": p.value}
        for p in ledger.get_positions()
    ]
    if not rows:
        return pd.DataFrame(columns=POSITION_COLUMNS)
    return pd.DataFrame(rows, columns=POSITION_COLUMNS)


def transactions_frame(ledger: AccountLedger) -> pd.DataFrame:
    """
    One row per filled order in processing order.
    amount is the signed cash flow: negative for buys, positive for sells.
    """
    rows = []
    for seq, order in enumerate(ledger.get_transactions()):
        flow = order.quantity * order.price
        rows.append(
            {
                "seq": seq,
                "kind": order.kind.value,
                "name": order.name,
                "quantity": order.quantity,
                "price": order.price,
                "amount": -flow if order.kind == OrderKind.BUY else flow,
            }
        )
    if not rows:
        return pd.DataFrame(columns=TRANSACTION_COLUMNS)
    return pd.DataFrame(rows, columns=TRANSACTION_COLUMNS)


def print_report(ledger: AccountLedger, initial_cash: float | None = None) -> PortfolioState:
    """
    Print an account summary: cash, holdings at cost, and transaction counts.

    Parameters
    ----------
    ledger : AccountLedger
        The account to summarize.
    initial_cash : float, optional
        Starting cash; when given, net cash flow since inception is printed too.

    Returns
    -------
    PortfolioState
        The snapshot the report was printed from.
    """
    state = ledger.get_portfolio()
    txns = transactions_frame(ledger)
    n_buys = int((txns["kind"] == OrderKind.BUY.value).sum()) if not txns.empty else 0
    n_sells = len(txns) - n_buys

    print("--- Account Ledger ---")
    if initial_cash is not None:
        print(f"Initial cash:    {initial_cash:,.2f}")
    print(f"Cash balance:    {state.cash:,.2f}")
    if initial_cash is not None:
        print(f"Net cash flow:   {state.cash - initial_cash:,.2f}")
    print(f"Holdings @ cost: {state.market_value_at_cost:,.2f}")
    for pos in state.positions.values():
        print(f"  {pos.name:<10} {pos.quantity:>8} @ {pos.price:,.4f}")
    print(f"Transactions:    {len(txns)} ({n_buys} buy, {n_sells} sell)")
    print("----------------------")
    return state
