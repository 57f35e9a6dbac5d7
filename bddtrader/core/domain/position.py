'''
Position dataclass representing a net holding of one instrument.

Positions are never stored: they are folded from a portfolio's trade
log on demand. Folding logic belongs in aggregation, not here.
'''

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from bddtrader.core.domain._require_str import _require_str
from bddtrader.core.domain.trade import Trade


__all__ = ['Position']

_ZERO = Decimal(0)


@dataclass(frozen=True)
class Position:

    '''
    A net holding of one instrument within a portfolio.

    Args:
        symbol (str): Instrument symbol.
        quantity (int): Net quantity, negative when more was sold than bought.
        average_price_in_cents (Decimal): Volume-weighted entry price of the held side.
    '''

    symbol: str
    quantity: int
    average_price_in_cents: Decimal

    def __post_init__(self) -> None:

        '''Validate invariants at construction time.'''

        _require_str('Position', 'symbol', self.symbol)

        if self.average_price_in_cents < _ZERO:
            msg = 'Position.average_price_in_cents must be non-negative'
            raise ValueError(msg)

    @classmethod
    def from_trade(cls, trade: Trade) -> Position:

        '''
        Return the position produced by a single trade.

        Args:
            trade (Trade): Opening trade.

        Returns:
            Position: Holding of trade.symbol with the trade's signed quantity.
        '''

        return cls(
            symbol=trade.symbol,
            quantity=trade.signed_quantity,
            average_price_in_cents=Decimal(trade.price_in_cents),
        )

    @property
    def is_short(self) -> bool:

        '''Return True if more units were sold than bought.'''

        return self.quantity < 0
