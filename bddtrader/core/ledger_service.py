'''
Orchestrate client registration and portfolio queries.

LedgerService owns the client and portfolio directories of one ledger.
A single lock spans registration and every read, so a client is never
visible without its funded portfolio and identifiers are assigned
without gaps.
'''

from __future__ import annotations

import logging
import threading

from bddtrader.config import LedgerSettings
from bddtrader.core.client_directory import ClientDirectory
from bddtrader.core.domain.client import Client
from bddtrader.core.domain.errors import (
    DuplicatePortfolioError,
    LedgerConsistencyError,
    PortfolioNotFoundError,
)
from bddtrader.core.domain.lookup import Lookup
from bddtrader.core.domain.portfolio import Portfolio
from bddtrader.core.domain.position import Position
from bddtrader.core.domain.trade import Trade
from bddtrader.core.portfolio_directory import PortfolioDirectory
from bddtrader.infrastructure.observability import bound_context, configure_logging

__all__ = ['LedgerService']

_log = logging.getLogger(__name__)


class LedgerService:

    '''
    Register clients and answer client and portfolio queries.

    Args:
        clients (ClientDirectory): Directory of registered clients.
        portfolios (PortfolioDirectory): Directory of portfolios keyed by client id.
    '''

    def __init__(self, clients: ClientDirectory, portfolios: PortfolioDirectory) -> None:

        self.clients = clients
        self.portfolios = portfolios
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: LedgerSettings | None = None) -> LedgerService:

        '''
        Compose a service over fresh, empty directories.

        Args:
            settings (LedgerSettings | None): Ledger settings, defaults when None.

        Returns:
            LedgerService: Service owning its own directories.
        '''

        return cls(ClientDirectory(), PortfolioDirectory(settings))

    @classmethod
    def bootstrap(cls, settings: LedgerSettings | None = None) -> LedgerService:

        '''
        Configure process logging and compose a service, for process startup.

        Args:
            settings (LedgerSettings | None): Ledger settings, read from the
                environment when None.

        Returns:
            LedgerService: Service owning its own directories.
        '''

        settings = settings or LedgerSettings.from_env()
        configure_logging(settings.log_level)
        _log.info('ledger started: funding_symbol=%s', settings.funding_symbol)
        return cls.from_settings(settings)

    def register_client(self, candidate: Client) -> Client:

        '''
        Register a client and seed its funded portfolio.

        Either both the client and its portfolio exist afterwards or,
        on failure, neither does.

        Args:
            candidate (Client): Client to register.

        Returns:
            Client: Registered client carrying its identifier.
        '''

        with self._lock:
            client = self.clients.register(candidate)
            client_id: int = client.client_id  # type: ignore[assignment]

            with bound_context(client_id=client_id):
                try:
                    self.portfolios.create(client_id)
                except DuplicatePortfolioError as exc:
                    self.clients.remove(client_id)
                    _log.error('portfolio already existed for new client: client_id=%s', client_id)
                    msg = f'portfolio already existed for newly assigned client id {client_id}'
                    raise LedgerConsistencyError(msg) from exc

                _log.info('client registered: client_id=%s', client_id)

        return client

    def find_client_by_id(self, client_id: int) -> Client | None:

        '''Return the client with client_id, or None if never registered.'''

        with self._lock:
            return self.clients.find_by_id(client_id)

    def find_all_clients(self) -> list[Client]:

        '''Return all registered clients in registration order.'''

        with self._lock:
            return self.clients.find_all()

    def view_portfolio(self, portfolio_id: int) -> Portfolio:

        '''
        Return the portfolio with portfolio_id.

        Args:
            portfolio_id (int): Portfolio identifier.

        Returns:
            Portfolio: Current snapshot.
        '''

        with self._lock:
            portfolio = self.portfolios.find_by_id(portfolio_id)

        if portfolio is None:
            with bound_context(portfolio_id=portfolio_id):
                _log.warning('portfolio not found: portfolio_id=%s', portfolio_id)
            raise PortfolioNotFoundError(portfolio_id)

        return portfolio

    def view_portfolio_for_client(self, client_id: int) -> Portfolio:

        '''Return the portfolio owned by client_id, which shares its identifier.'''

        return self.view_portfolio(client_id)

    def view_portfolio_positions_for_client(self, client_id: int) -> list[Position]:

        '''Return the net positions of the portfolio owned by client_id.'''

        return self.view_portfolio_for_client(client_id).positions

    def lookup_client(self, client_id: int) -> Lookup[Client]:

        '''Return the client lookup as a result value.'''

        client = self.find_client_by_id(client_id)
        if client is None:
            return Lookup.missing()
        return Lookup.found(client)

    def lookup_portfolio(self, portfolio_id: int) -> Lookup[Portfolio]:

        '''Return the portfolio lookup as a result value.'''

        try:
            return Lookup.found(self.view_portfolio(portfolio_id))
        except PortfolioNotFoundError as exc:
            return Lookup.missing(exc)

    def record_trade(self, client_id: int, trade: Trade) -> Portfolio:

        '''
        Append a trade to the portfolio owned by client_id.

        Args:
            client_id (int): Owning client.
            trade (Trade): Trade to record.

        Returns:
            Portfolio: Updated snapshot.
        '''

        with self._lock:
            portfolio = self.portfolios.record(client_id, trade)

        with bound_context(client_id=client_id):
            _log.info(
                'trade recorded: client_id=%s direction=%s symbol=%s quantity=%s',
                client_id,
                trade.direction.value,
                trade.symbol,
                trade.quantity,
            )
        return portfolio

    def reset(self) -> None:

        '''Forget all clients and portfolios and restart identifiers at 1.'''

        with self._lock:
            self.clients.reset()
            self.portfolios.reset()
