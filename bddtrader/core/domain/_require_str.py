'''
Validate that a string field is non-empty.

Shared validation helper used across the domain dataclasses
to enforce non-empty string invariants at construction time.
'''

from __future__ import annotations

__all__ = ['_is_blank', '_require_str']


def _is_blank(value: object) -> bool:

    '''Return True if value is not a string, or is empty or whitespace only.'''

    return not isinstance(value, str) or not value.strip()


def _require_str(
    cls: str,
    field: str,
    value: object,
    *,
    error: type[Exception] = ValueError,
) -> None:

    '''
    Validate that a string field is non-empty.

    Args:
        cls (str): Class name for error context.
        field (str): Field name for error context.
        value (object): Value to validate.
        error (type[Exception]): Exception type raised on violation.
    '''

    if _is_blank(value):
        msg = f'{cls}.{field} must be a non-empty string'
        raise error(msg)
