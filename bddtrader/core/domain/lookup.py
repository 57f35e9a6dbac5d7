'''
Lookup result carrying either a value or a tagged absence.

Lets a boundary layer map not-found outcomes uniformly, whether the
underlying operation reports absence (clients) or raises (portfolios).
'''

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from bddtrader.core.domain.errors import LedgerError

__all__ = ['Lookup']

T = TypeVar('T')


@dataclass(frozen=True)
class Lookup(Generic[T]):

    '''
    Outcome of a point lookup.

    Args:
        value (T | None): Found value, None when absent.
        error (LedgerError | None): Why the value is absent, None for a plain absence.
    '''

    value: T | None = None
    error: LedgerError | None = None

    def __post_init__(self) -> None:

        '''Validate invariants at construction time.'''

        if self.value is not None and self.error is not None:
            msg = 'Lookup cannot carry both a value and an error'
            raise ValueError(msg)

    @classmethod
    def found(cls, value: T) -> Lookup[T]:

        return cls(value=value)

    @classmethod
    def missing(cls, error: LedgerError | None = None) -> Lookup[T]:

        return cls(error=error)

    @property
    def is_found(self) -> bool:

        '''Return True if a value is present.'''

        return self.value is not None

    def unwrap(self) -> T:

        '''
        Return the value or raise why it is absent.

        Returns:
            T: The found value.
        '''

        if self.value is not None:
            return self.value
        if self.error is not None:
            raise self.error
        msg = 'lookup found no value'
        raise LookupError(msg)
