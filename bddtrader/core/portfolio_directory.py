'''
In-memory directory of portfolios keyed by identifier.

Every portfolio is created under its owning client's identifier and
seeded with a single funding trade.
'''

from __future__ import annotations

import logging
import threading

from bddtrader.config import LedgerSettings
from bddtrader.core.domain.errors import DuplicatePortfolioError, PortfolioNotFoundError
from bddtrader.core.domain.portfolio import Portfolio
from bddtrader.core.domain.trade import Trade

__all__ = ['PortfolioDirectory']

_log = logging.getLogger(__name__)


class PortfolioDirectory:

    '''
    Store portfolios keyed by identifier.

    Args:
        settings (LedgerSettings | None): Funding trade settings, defaults when None.
    '''

    def __init__(self, settings: LedgerSettings | None = None) -> None:

        self._settings = settings or LedgerSettings()
        self._lock = threading.Lock()
        self._portfolios: dict[int, Portfolio] = {}

    def __len__(self) -> int:

        with self._lock:
            return len(self._portfolios)

    def create(self, client_id: int) -> Portfolio:

        '''
        Create and store a funded portfolio for client_id.

        Args:
            client_id (int): Owning client, also used as portfolio_id.

        Returns:
            Portfolio: New portfolio holding only the funding trade.
        '''

        settings = self._settings
        funding = Trade.buy(
            settings.funding_quantity,
            settings.funding_symbol,
            settings.funding_price_in_cents,
        )

        with self._lock:
            if client_id in self._portfolios:
                msg = f'portfolio already exists for id {client_id}'
                raise DuplicatePortfolioError(msg)
            portfolio = Portfolio(
                portfolio_id=client_id,
                client_id=client_id,
                trades=(funding,),
                cash_symbol=settings.funding_symbol,
            )
            self._portfolios[client_id] = portfolio

        _log.debug(
            'portfolio funded: portfolio_id=%s cash_in_cents=%s',
            client_id,
            portfolio.cash_in_cents,
        )
        return portfolio

    def find_by_id(self, portfolio_id: int) -> Portfolio | None:

        '''Return the portfolio with portfolio_id, or None if absent.'''

        with self._lock:
            return self._portfolios.get(portfolio_id)

    def record(self, portfolio_id: int, trade: Trade) -> Portfolio:

        '''
        Append a trade to a portfolio's log.

        Args:
            portfolio_id (int): Portfolio to update.
            trade (Trade): Validated trade to record.

        Returns:
            Portfolio: Updated snapshot.
        '''

        with self._lock:
            portfolio = self._portfolios.get(portfolio_id)
            if portfolio is None:
                raise PortfolioNotFoundError(portfolio_id)
            portfolio = portfolio.with_trade(trade)
            self._portfolios[portfolio_id] = portfolio

        return portfolio

    def reset(self) -> None:

        '''Forget all portfolios.'''

        with self._lock:
            self._portfolios.clear()
