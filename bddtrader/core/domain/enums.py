'''
Enumerated types for the BDDTrader ledger domain.
'''

from __future__ import annotations

from enum import Enum


__all__ = ['TradeDirection']


class TradeDirection(Enum):

    '''Buy or sell direction for trades.'''

    BUY = 'BUY'
    SELL = 'SELL'
