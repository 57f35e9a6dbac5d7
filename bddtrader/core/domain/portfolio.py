'''
Portfolio dataclass representing a client's ledger of trades.

Portfolios are immutable snapshots: recording a trade returns a new
Portfolio, so a snapshot handed to a reader never changes underneath
it. Cash and positions are derived from the trade log on every access.
'''

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal

from bddtrader.core.domain.aggregation import (
    CASH_SYMBOL,
    cash_in_cents,
    positions_of,
    to_currency,
)
from bddtrader.core.domain.position import Position
from bddtrader.core.domain.trade import Trade


__all__ = ['Portfolio']


@dataclass(frozen=True)
class Portfolio:

    '''
    A per-client ledger of trades.

    Args:
        portfolio_id (int): Portfolio identifier, always equal to client_id.
        client_id (int): Owning client identifier.
        trades (tuple[Trade, ...]): Trade log in recording order.
        cash_symbol (str): Symbol of the synthetic cash instrument.
    '''

    portfolio_id: int
    client_id: int
    trades: tuple[Trade, ...] = ()
    cash_symbol: str = CASH_SYMBOL

    def __post_init__(self) -> None:

        '''Validate invariants at construction time.'''

        if self.portfolio_id != self.client_id:
            msg = (
                f'Portfolio.portfolio_id ({self.portfolio_id}) must equal '
                f'client_id ({self.client_id})'
            )
            raise ValueError(msg)

    @property
    def cash_in_cents(self) -> int:

        '''Return the cash balance in cents.'''

        return cash_in_cents(self.trades, self.cash_symbol)

    @property
    def cash(self) -> Decimal:

        '''Return the cash balance in currency units, two decimals.'''

        return to_currency(self.cash_in_cents)

    @property
    def positions(self) -> list[Position]:

        '''Return the net positions folded from the trade log.'''

        return positions_of(self.trades)

    def with_trade(self, trade: Trade) -> Portfolio:

        '''
        Return a copy with trade appended to the log.

        Args:
            trade (Trade): Trade to record.

        Returns:
            Portfolio: New snapshot including trade.
        '''

        return replace(self, trades=(*self.trades, trade))
