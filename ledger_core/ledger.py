"""
AccountLedger: cash, holdings, FIFO buy lots and transaction history for one account.

Orders are filled to the largest legal quantity (possibly zero), never rejected
for exceeding cash or holdings. Callers only ever see snapshots.
"""

from __future__ import annotations

import logging
import math
import threading

from ledger_core.lots import BuyLotQueue
from ledger_core.order import InvalidOrder, Order, OrderKind, SecurityPosition, validate_order
from ledger_core.types import PortfolioState

logger = logging.getLogger(__name__)


class AccountLedger:
    """
    Single brokerage account. Whole shares only; prices are supplied per order.

    Positions carry weighted-average cost. On a sale, the cost removed from the
    basis comes from the oldest buy lots (FIFO), not from the sale price.
    """

    def __init__(self, cash_balance: float) -> None:
        self._cash = cash_balance
        self._portfolio: dict[str, SecurityPosition] = {}
        self._buy_lots: dict[str, BuyLotQueue] = {}
        self._transactions: list[Order] = []
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return (
            f"AccountLedger(cash={self._cash:.2f}, positions={len(self._portfolio)}, "
            f"transactions={len(self._transactions)})"
        )

    # --- Orders ---

    def submit_order(self, order: Order) -> int:
        """
        Submit a buy or sell. Returns the number of shares actually filled.

        Buys are capped by cash (floor(cash / price)); sells by the quantity held.
        Zero fills leave all state unchanged and are not logged.
        Raises InvalidOrder for malformed orders, before any state is touched.
        """
        try:
            validate_order(order)
        except InvalidOrder as e:
            logger.warning("Invalid order rejected: %s", e)
            raise
        with self._lock:
            if order.kind == OrderKind.BUY:
                return self._handle_buy(order)
            return self._handle_sell(order)

    def _affordable(self, price: float, requested: int) -> int:
        """Largest quantity up to requested whose cost does not exceed cash."""
        if self._cash <= 0:
            return 0
        ratio = self._cash / price
        # Tiny prices overflow the ratio to inf; the request caps it first.
        if not math.isfinite(ratio) or ratio >= requested:
            qty = requested
        else:
            qty = math.floor(ratio)
        # Rounding in the division can overshoot by a share.
        while qty > 0 and qty * price > self._cash:
            qty -= max(1, qty >> 52)
        return qty

    def _handle_buy(self, order: Order) -> int:
        requested = order.quantity
        if order.price == 0:
            filled = requested
        else:
            filled = self._affordable(order.price, requested)
        if filled < requested:
            logger.info("Buy %s: filled %d of %d (cash %.2f)", order.name, filled, requested, self._cash)
        if filled == 0:
            return 0

        fill = Order.buy(order.name, filled, order.price)
        existing = self._portfolio.get(fill.name)
        if existing is None:
            self._portfolio[fill.name] = fill.position
        else:
            new_qty = existing.quantity + filled
            new_price = (filled * fill.price + existing.quantity * existing.price) / new_qty
            self._portfolio[fill.name] = SecurityPosition(fill.name, new_qty, new_price)

        self._buy_lots.setdefault(fill.name, BuyLotQueue()).push(fill)
        self._cash -= filled * fill.price
        self._transactions.append(fill)
        logger.debug("Bought %d %s @ %s", filled, fill.name, fill.price)
        return filled

    def _handle_sell(self, order: Order) -> int:
        existing = self._portfolio.get(order.name)
        if existing is None:
            logger.info("Sell %s: no position held", order.name)
            return 0
        requested = order.quantity
        filled = min(requested, existing.quantity)
        if filled < requested:
            logger.info("Sell %s: filled %d of %d (held %d)", order.name, filled, requested, existing.quantity)
        if filled == 0:
            return 0

        cost_removed = self._buy_lots[order.name].consume(filled)
        remaining = existing.quantity - filled
        if remaining == 0:
            del self._portfolio[order.name]
            del self._buy_lots[order.name]
        else:
            new_price = (existing.price * existing.quantity - cost_removed) / remaining
            self._portfolio[order.name] = SecurityPosition(order.name, remaining, new_price)

        fill = Order.sell(order.name, filled, order.price)
        self._cash += filled * fill.price
        self._transactions.append(fill)
        logger.debug("Sold %d %s @ %s (cost removed %.2f)", filled, fill.name, fill.price, cost_removed)
        return filled

    # --- Queries ---

    def get_positions(self) -> list[SecurityPosition]:
        """Current holdings, one per security, sorted by security name."""
        with self._lock:
            return [self._portfolio[name] for name in sorted(self._portfolio)]

    def get_transactions(self) -> list[Order]:
        """Filled orders in processing order."""
        with self._lock:
            return list(self._transactions)

    def get_cash_balance(self) -> float:
        with self._lock:
            return self._cash

    def position(self, name: str) -> SecurityPosition | None:
        """Holding for name, or None if not held."""
        with self._lock:
            return self._portfolio.get(name)

    def get_buy_lots(self, name: str) -> list[Order]:
        """Outstanding buy lots for name, oldest first. Empty if not held."""
        with self._lock:
            lots = self._buy_lots.get(name)
            return lots.snapshot() if lots is not None else []

    def get_portfolio(self) -> PortfolioState:
        """Snapshot of cash and positions (keyed in name order)."""
        with self._lock:
            positions = {name: self._portfolio[name] for name in sorted(self._portfolio)}
            return PortfolioState(cash=self._cash, positions=positions)
