'''
Represent the ledger core of the BDDTrader system.

Re-exports LedgerService and the directories it composes.
'''

from __future__ import annotations

from bddtrader.core.client_directory import ClientDirectory
from bddtrader.core.ledger_service import LedgerService
from bddtrader.core.portfolio_directory import PortfolioDirectory

__all__ = ['ClientDirectory', 'LedgerService', 'PortfolioDirectory']
