'''
Domain dataclasses for the BDDTrader ledger.

Re-exports all domain types: the trade direction enum, dataclasses for
trades, positions, clients and portfolios, the lookup result type,
the aggregation functions and the ledger error taxonomy.
'''

from __future__ import annotations

from bddtrader.core.domain.aggregation import (
    CASH_SYMBOL,
    cash_in_cents,
    positions_of,
    to_currency,
)
from bddtrader.core.domain.client import MANDATORY_FIELDS, Client
from bddtrader.core.domain.enums import TradeDirection
from bddtrader.core.domain.errors import (
    DuplicatePortfolioError,
    InvalidTradeError,
    LedgerConsistencyError,
    LedgerError,
    MissingMandatoryFieldsError,
    PortfolioNotFoundError,
)
from bddtrader.core.domain.lookup import Lookup
from bddtrader.core.domain.portfolio import Portfolio
from bddtrader.core.domain.position import Position
from bddtrader.core.domain.trade import Trade

__all__ = [
    'CASH_SYMBOL',
    'Client',
    'DuplicatePortfolioError',
    'InvalidTradeError',
    'LedgerConsistencyError',
    'LedgerError',
    'Lookup',
    'MANDATORY_FIELDS',
    'MissingMandatoryFieldsError',
    'Portfolio',
    'PortfolioNotFoundError',
    'Position',
    'Trade',
    'TradeDirection',
    'cash_in_cents',
    'positions_of',
    'to_currency',
]
