"""
FIFO queue of outstanding buy lots for a single security.

Each lot is a buy fill not yet fully sold. Sells drain lots oldest first;
the value drained is the cost removed from the position's basis.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import replace

from ledger_core.order import InvalidOrder, Order, OrderKind


class BuyLotQueue:
    """
    Explicit deque of buy fills, oldest at the head.
    Total quantity across lots always equals the held quantity of the security.
    """

    def __init__(self) -> None:
        self._lots: deque[Order] = deque()
        self._quantity = 0

    def __len__(self) -> int:
        return len(self._lots)

    def __iter__(self) -> Iterator[Order]:
        return iter(list(self._lots))

    def __bool__(self) -> bool:
        return bool(self._lots)

    def __repr__(self) -> str:
        return f"BuyLotQueue(lots={len(self._lots)}, quantity={self.total_quantity})"

    @property
    def total_quantity(self) -> int:
        return self._quantity

    @property
    def total_cost(self) -> float:
        return sum(lot.quantity * lot.price for lot in self._lots)

    def push(self, order: Order) -> None:
        """Append a buy fill at the tail."""
        if order.kind != OrderKind.BUY:
            raise InvalidOrder("Only buy fills can be queued as lots")
        if order.quantity <= 0:
            raise InvalidOrder("Buy lot quantity must be positive")
        self._lots.append(order)
        self._quantity += order.quantity

    def consume(self, quantity: int) -> float:
        """
        Drain quantity shares from the oldest lots. Returns the cost removed
        (sum of consumed shares times each lot's price).
        """
        if quantity < 0:
            raise ValueError(f"Cannot consume a negative quantity: {quantity}")
        if quantity > self.total_quantity:
            raise ValueError(f"Cannot consume {quantity} shares; only {self.total_quantity} queued")

        remaining = quantity
        cost_removed = 0.0
        while remaining > 0:
            head = self._lots[0]
            if remaining >= head.quantity:
                cost_removed += head.quantity * head.price
                remaining -= head.quantity
                self._lots.popleft()
            else:
                cost_removed += remaining * head.price
                self._lots[0] = replace(head, position=replace(head.position, quantity=head.quantity - remaining))
                remaining = 0
        self._quantity -= quantity
        return cost_removed

    def snapshot(self) -> list[Order]:
        """Copy of the queued lots, oldest first."""
        return list(self._lots)
