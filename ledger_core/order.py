"""
Order and position types for the account ledger.

Immutable. An Order is both the request as submitted and, once processed,
the fill actually recorded in the transaction log.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from enum import Enum


class OrderKind(Enum):
    BUY = "buy"
    SELL = "sell"


class InvalidOrder(ValueError):
    """Raised when an order is malformed (bad kind, name, quantity or price)."""


@dataclass(frozen=True)
class SecurityPosition:
    """
    A quantity of one security at a price.

    For a holding, price is the weighted-average cost. For an order or fill,
    price is the requested/execution price.
    """

    name: str
    quantity: int
    price: float

    @property
    def value(self) -> float:
        return self.quantity * self.price


@dataclass(frozen=True)
class Order:
    """A buy or sell of whole shares of one security."""

    kind: OrderKind
    position: SecurityPosition

    @classmethod
    def buy(cls, name: str, quantity: int, price: float) -> Order:
        return cls(OrderKind.BUY, SecurityPosition(name, quantity, price))

    @classmethod
    def sell(cls, name: str, quantity: int, price: float) -> Order:
        return cls(OrderKind.SELL, SecurityPosition(name, quantity, price))

    @property
    def name(self) -> str:
        return self.position.name

    @property
    def quantity(self) -> int:
        return self.position.quantity

    @property
    def price(self) -> float:
        return self.position.price


def validate_order(order: Order) -> None:
    """
    Fail fast on malformed input. Raises InvalidOrder; returns None otherwise.

    Quantities must be non-negative integers (no fractional shares); prices
    must be finite and non-negative; the security name must be non-empty.
    """
    if not isinstance(order, Order):
        raise InvalidOrder(f"Expected Order, got {type(order).__name__}")
    if not isinstance(order.kind, OrderKind):
        raise InvalidOrder(f"Unknown order kind: {order.kind!r}")
    pos = order.position
    if not isinstance(pos, SecurityPosition):
        raise InvalidOrder(f"Expected SecurityPosition, got {type(pos).__name__}")
    if not isinstance(pos.name, str) or not pos.name:
        raise InvalidOrder("Security name must be a non-empty string")
    if isinstance(pos.quantity, bool) or not isinstance(pos.quantity, numbers.Integral):
        raise InvalidOrder(f"Quantity must be a whole number of shares, got {pos.quantity!r}")
    if pos.quantity < 0:
        raise InvalidOrder(f"Quantity must be non-negative, got {pos.quantity}")
    if isinstance(pos.price, bool) or not isinstance(pos.price, numbers.Real):
        raise InvalidOrder(f"Price must be a real number, got {pos.price!r}")
    if not math.isfinite(pos.price) or pos.price < 0:
        raise InvalidOrder(f"Price must be finite and non-negative, got {pos.price}")
