"""
Tests for reporting: positions_frame, transactions_frame, print_report.
"""

import pandas as pd

from ledger_core import AccountLedger, Order
from reporting import positions_frame, print_report, transactions_frame
from reporting.ledger_report import POSITION_COLUMNS, TRANSACTION_COLUMNS


def _sample_ledger() -> AccountLedger:
    ledger = AccountLedger(10_000.0)
    ledger.submit_order(Order.buy("MSFT", 10, 10.0))
    ledger.submit_order(Order.buy("AAPL", 10, 40.0))
    ledger.submit_order(Order.sell("MSFT", 4, 15.0))
    return ledger


# --- positions_frame ---


def test_positions_frame_empty_has_columns():
    df = positions_frame(AccountLedger(100.0))
    assert df.empty
    assert list(df.columns) == POSITION_COLUMNS


def test_positions_frame_rows():
    df = positions_frame(_sample_ledger())
    assert list(df.columns) == POSITION_COLUMNS
    assert list(df["name"]) == ["AAPL", "MSFT"]
    assert list(df["quantity"]) == [10, 6]
    assert df.loc[df["name"] == "MSFT", "cost_basis"].iloc[0] == 60.0


# --- transactions_frame ---


def test_transactions_frame_empty_has_columns():
    df = transactions_frame(AccountLedger(100.0))
    assert df.empty
    assert list(df.columns) == TRANSACTION_COLUMNS


def test_transactions_frame_signed_amounts():
    df = transactions_frame(_sample_ledger())
    assert list(df["seq"]) == [0, 1, 2]
    assert list(df["kind"]) == ["buy", "buy", "sell"]
    assert list(df["amount"]) == [-100.0, -400.0, 60.0]
    assert df["amount"].sum() == 9_560.0 - 10_000.0


def test_transactions_frame_is_dataframe():
    assert isinstance(transactions_frame(_sample_ledger()), pd.DataFrame)


# --- print_report ---


def test_print_report_output(capsys):
    ledger = _sample_ledger()
    state = print_report(ledger, initial_cash=10_000.0)
    out = capsys.readouterr().out
    assert "Cash balance:    9,560.00" in out
    assert "Net cash flow:   -440.00" in out
    assert "Transactions:    3 (2 buy, 1 sell)" in out
    assert state.cash == 9_560.0
    assert state.position("MSFT") == 6


def test_print_report_empty_ledger(capsys):
    state = print_report(AccountLedger(0.0))
    out = capsys.readouterr().out
    assert "Initial cash" not in out
    assert "Transactions:    0 (0 buy, 0 sell)" in out
    assert state.positions == {}
