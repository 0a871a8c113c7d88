"""
Reporting on top of ledger-core: pandas views of positions and transactions,
and a printed account summary.
"""

from reporting.ledger_report import positions_frame, print_report, transactions_frame

__all__ = [
    "positions_frame",
    "transactions_frame",
    "print_report",
]
