'''
Error taxonomy for the ledger core.

Validation errors also derive from ValueError and lookup failures from
LookupError, so callers may catch either the ledger type or the builtin.
'''

from __future__ import annotations

__all__ = [
    'DuplicatePortfolioError',
    'InvalidTradeError',
    'LedgerConsistencyError',
    'LedgerError',
    'MissingMandatoryFieldsError',
    'PortfolioNotFoundError',
]


class LedgerError(Exception):

    '''
    Base exception for all ledger failures.

    Args:
        message (str): Human-readable error description
    '''

    def __init__(self, message: str) -> None:

        '''
        Store the error message.

        Args:
            message (str): Human-readable error description
        '''

        self.message = message
        super().__init__(message)


class MissingMandatoryFieldsError(LedgerError, ValueError):

    '''
    Raised when a client candidate lacks a mandatory field.

    Args:
        fields (tuple[str, ...]): Names of the empty mandatory fields
    '''

    def __init__(self, fields: tuple[str, ...]) -> None:

        self.fields = fields
        super().__init__(f'missing mandatory fields: {", ".join(fields)}')


class PortfolioNotFoundError(LedgerError, LookupError):

    '''
    Raised when no portfolio exists for the requested identifier.

    Args:
        portfolio_id (int): Identifier that was looked up
    '''

    def __init__(self, portfolio_id: int) -> None:

        self.portfolio_id = portfolio_id
        super().__init__(f'no portfolio found for id {portfolio_id}')


class InvalidTradeError(LedgerError, ValueError):

    '''Raised when a trade is constructed with an invalid quantity, price or symbol.'''


class DuplicatePortfolioError(LedgerError):

    '''Raised when a portfolio already exists for the identifier being created.'''


class LedgerConsistencyError(LedgerError, RuntimeError):

    '''Raised when an internal ledger invariant is broken. Not recoverable.'''
