'''
Client dataclass representing a brokerage client.

An unregistered candidate carries client_id=None. Mandatory fields are
checked by the client directory at registration, not at construction,
so that incomplete candidates can be reported field by field.
'''

from __future__ import annotations

from dataclasses import dataclass, replace

from bddtrader.core.domain._require_str import _is_blank


__all__ = ['Client', 'MANDATORY_FIELDS']

MANDATORY_FIELDS: tuple[str, ...] = ('first_name', 'last_name', 'email')


@dataclass(frozen=True)
class Client:

    '''
    A brokerage client, registered once a client_id is assigned.

    Args:
        first_name (str): Given name.
        last_name (str): Family name.
        email (str): Contact email, only checked for non-emptiness.
        client_id (int | None): Directory-assigned identifier, None until registered.
    '''

    first_name: str
    last_name: str
    email: str
    client_id: int | None = None

    @property
    def is_registered(self) -> bool:

        '''Return True once the directory has assigned an identifier.'''

        return self.client_id is not None

    def missing_fields(self) -> tuple[str, ...]:

        '''Return the names of mandatory fields that are empty.'''

        return tuple(f for f in MANDATORY_FIELDS if _is_blank(getattr(self, f)))

    def with_id(self, client_id: int) -> Client:

        '''Return a registered copy carrying client_id.'''

        return replace(self, client_id=client_id)
