'''
Runtime settings for the BDDTrader ledger.

Settings come from BDDTRADER_* environment variables, optionally
loaded from a .env file in the working directory.
'''

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

__all__ = ['LedgerSettings']

_PREFIX = 'BDDTRADER_'
_CASH_SYMBOL = 'CASH'
_LOG_LEVELS = frozenset({'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'})


def _int_setting(environ: Mapping[str, str], name: str, default: int) -> int:

    raw = environ.get(_PREFIX + name)
    if raw is None or raw == '':
        return default
    try:
        return int(raw)
    except ValueError as exc:
        msg = f'{_PREFIX}{name} must be an integer, got {raw!r}'
        raise ValueError(msg) from exc


@dataclass(frozen=True)
class LedgerSettings:

    '''
    Settings that shape a new ledger.

    Args:
        funding_symbol (str): Instrument used for the funding trade.
        funding_quantity (int): Units bought by the funding trade, must be positive.
        funding_price_in_cents (int): Unit price of the funding trade, must be non-negative.
        log_level (str): Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    '''

    funding_symbol: str = _CASH_SYMBOL
    funding_quantity: int = 100_000
    funding_price_in_cents: int = 1
    log_level: str = 'INFO'

    def __post_init__(self) -> None:

        '''Validate invariants at construction time.'''

        if not self.funding_symbol or not self.funding_symbol.strip():
            msg = 'LedgerSettings.funding_symbol must be a non-empty string'
            raise ValueError(msg)

        if self.funding_quantity <= 0:
            msg = 'LedgerSettings.funding_quantity must be positive'
            raise ValueError(msg)

        if self.funding_price_in_cents < 0:
            msg = 'LedgerSettings.funding_price_in_cents must be non-negative'
            raise ValueError(msg)

        if self.log_level.upper() not in _LOG_LEVELS:
            msg = f'LedgerSettings.log_level must be one of {sorted(_LOG_LEVELS)}'
            raise ValueError(msg)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> LedgerSettings:

        '''
        Build settings from BDDTRADER_* variables.

        Args:
            environ (Mapping[str, str] | None): Variables to read. When None,
                a .env file is loaded and os.environ is used.

        Returns:
            LedgerSettings: Settings with defaults for unset variables.
        '''

        if environ is None:
            load_dotenv(find_dotenv(usecwd=True))
            environ = os.environ

        defaults = cls()
        return cls(
            funding_symbol=environ.get(_PREFIX + 'FUNDING_SYMBOL') or defaults.funding_symbol,
            funding_quantity=_int_setting(environ, 'FUNDING_QUANTITY', defaults.funding_quantity),
            funding_price_in_cents=_int_setting(
                environ, 'FUNDING_PRICE_IN_CENTS', defaults.funding_price_in_cents,
            ),
            log_level=(environ.get(_PREFIX + 'LOG_LEVEL') or defaults.log_level).upper(),
        )
