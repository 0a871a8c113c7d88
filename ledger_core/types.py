"""
Snapshot types returned by the ledger. Never live references to ledger state.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ledger_core.order import SecurityPosition


@dataclass(frozen=True)
class PortfolioState:
    """
    Snapshot of cash and holdings. Positions are keyed by security name;
    prices are weighted-average cost.
    """

    cash: float = 0.0
    positions: dict[str, SecurityPosition] = field(default_factory=dict)

    def position(self, name: str) -> int:
        """Quantity held in name. 0 if not present."""
        pos = self.positions.get(name)
        return pos.quantity if pos is not None else 0

    @property
    def market_value_at_cost(self) -> float:
        return sum(p.value for p in self.positions.values())
