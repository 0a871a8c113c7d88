"""
ledger-core: single-account brokerage ledger.

Whole-share buys and sells against a cash balance, weighted-average cost basis,
FIFO buy lots. No market data, no persistence, no order matching.
"""

__version__ = "0.1.0"

from ledger_core.order import InvalidOrder, Order, OrderKind, SecurityPosition, validate_order
from ledger_core.lots import BuyLotQueue
from ledger_core.types import PortfolioState
from ledger_core.ledger import AccountLedger

__all__ = [
    "AccountLedger",
    "BuyLotQueue",
    "InvalidOrder",
    "Order",
    "OrderKind",
    "PortfolioState",
    "SecurityPosition",
    "validate_order",
]
