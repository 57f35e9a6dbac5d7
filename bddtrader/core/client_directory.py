'''
In-memory directory of registered clients.

Assigns sequential identifiers starting at 1. Identifiers are never
reused during the directory's lifetime; only reset() restarts them.
'''

from __future__ import annotations

import logging
import threading

from bddtrader.core.domain.client import Client
from bddtrader.core.domain.errors import MissingMandatoryFieldsError

__all__ = ['ClientDirectory']

_log = logging.getLogger(__name__)


class ClientDirectory:

    '''Store clients keyed by identifier, in registration order.'''

    def __init__(self) -> None:

        self._lock = threading.Lock()
        self._clients: dict[int, Client] = {}
        self._last_id = 0

    def __len__(self) -> int:

        with self._lock:
            return len(self._clients)

    def register(self, candidate: Client) -> Client:

        '''
        Validate a candidate, assign the next identifier and store it.

        Args:
            candidate (Client): Client to register, client_id is ignored.

        Returns:
            Client: Stored client carrying its assigned identifier.
        '''

        missing = candidate.missing_fields()
        if missing:
            _log.warning('client registration rejected: missing=%s', ','.join(missing))
            raise MissingMandatoryFieldsError(missing)

        with self._lock:
            self._last_id += 1
            client = candidate.with_id(self._last_id)
            self._clients[self._last_id] = client

        return client

    def find_by_id(self, client_id: int) -> Client | None:

        '''Return the client with client_id, or None if not registered.'''

        with self._lock:
            return self._clients.get(client_id)

    def find_all(self) -> list[Client]:

        '''Return all clients in registration order.'''

        with self._lock:
            return list(self._clients.values())

    def remove(self, client_id: int) -> None:

        '''Drop a client without rewinding the identifier sequence.'''

        with self._lock:
            if self._clients.pop(client_id, None) is None:
                _log.warning('remove called for unknown client: client_id=%s', client_id)

    def reset(self) -> None:

        '''Forget all clients and restart identifiers at 1.'''

        with self._lock:
            self._clients.clear()
            self._last_id = 0
