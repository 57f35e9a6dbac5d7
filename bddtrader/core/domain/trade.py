'''
Trade dataclass representing a single buy or sell in a portfolio.

Trades are immutable facts: once recorded, no field changes. Prices
are integer cents so that ledger accumulation never drifts.
'''

from __future__ import annotations

from dataclasses import dataclass

from bddtrader.core.domain._require_str import _require_str
from bddtrader.core.domain.enums import TradeDirection
from bddtrader.core.domain.errors import InvalidTradeError


__all__ = ['Trade']


@dataclass(frozen=True)
class Trade:

    '''
    A buy or sell of a quantity of an instrument at a unit price.

    Args:
        direction (TradeDirection): Buy or sell.
        quantity (int): Number of units traded, must be positive.
        symbol (str): Instrument symbol.
        price_in_cents (int): Unit price in cents, must be non-negative.
    '''

    direction: TradeDirection
    quantity: int
    symbol: str
    price_in_cents: int

    def __post_init__(self) -> None:

        '''Validate invariants at construction time.'''

        if not isinstance(self.direction, TradeDirection):
            msg = f'Trade.direction must be a TradeDirection, got {self.direction!r}'
            raise InvalidTradeError(msg)

        for field in ('quantity', 'price_in_cents'):
            value = getattr(self, field)
            if isinstance(value, bool) or not isinstance(value, int):
                msg = f'Trade.{field} must be an integer, got {type(value).__name__}'
                raise InvalidTradeError(msg)

        _require_str('Trade', 'symbol', self.symbol, error=InvalidTradeError)

        if self.quantity <= 0:
            msg = 'Trade.quantity must be positive'
            raise InvalidTradeError(msg)

        if self.price_in_cents < 0:
            msg = 'Trade.price_in_cents must be non-negative'
            raise InvalidTradeError(msg)

    @classmethod
    def buy(cls, quantity: int, symbol: str, price_in_cents: int) -> Trade:

        '''Return a BUY trade.'''

        return cls(TradeDirection.BUY, quantity, symbol, price_in_cents)

    @classmethod
    def sell(cls, quantity: int, symbol: str, price_in_cents: int) -> Trade:

        '''Return a SELL trade.'''

        return cls(TradeDirection.SELL, quantity, symbol, price_in_cents)

    @property
    def signed_quantity(self) -> int:

        '''Return quantity, negated for sells.'''

        if self.direction == TradeDirection.BUY:
            return self.quantity
        return -self.quantity

    @property
    def value_in_cents(self) -> int:

        '''Return the unsigned settlement value of the trade.'''

        return self.quantity * self.price_in_cents
