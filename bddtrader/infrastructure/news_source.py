'''
News lookup by ticker symbols.

The news feed itself is an external collaborator. This module defines
the NewsItem shape the ledger's boundary consumes, the NewsSource
protocol a feed must satisfy, and NewsDesk, which normalizes ticker
requests and keeps only items related to the requested tickers.
'''

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Protocol, runtime_checkable

import orjson

__all__ = [
    'NewsDesk',
    'NewsItem',
    'NewsSource',
    'StaticNewsSource',
    'parse_news',
    'parse_tickers',
]

_log = logging.getLogger(__name__)


def parse_tickers(tickers: str | Sequence[str]) -> tuple[str, ...]:

    '''
    Normalize a ticker request.

    Args:
        tickers (str | Sequence[str]): Comma-separated string such as 'FB,GOOGL', or a sequence.

    Returns:
        tuple[str, ...]: Upper-cased tickers, de-duplicated in request order.
    '''

    raw = tickers.split(',') if isinstance(tickers, str) else tickers
    normalized = tuple(dict.fromkeys(t.strip().upper() for t in raw if t.strip()))
    if not normalized:
        msg = 'at least one ticker is required'
        raise ValueError(msg)

    return normalized


@dataclass(frozen=True)
class NewsItem:

    '''
    A news article tagged with the tickers it relates to.

    Args:
        headline (str): Article headline.
        source (str): Publisher name.
        url (str): Link to the article.
        summary (str): Short summary, may be empty.
        related (frozenset[str]): Upper-case tickers the article relates to.
        published_at (datetime): Publication time, must be timezone-aware.
    '''

    headline: str
    source: str
    url: str
    summary: str
    related: frozenset[str]
    published_at: datetime

    def __post_init__(self) -> None:

        '''Validate invariants at construction time.'''

        if not self.headline:
            msg = 'NewsItem.headline must be a non-empty string'
            raise ValueError(msg)

        if self.published_at.tzinfo is None or self.published_at.utcoffset() is None:
            msg = 'NewsItem.published_at must be timezone-aware'
            raise ValueError(msg)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> NewsItem:

        '''
        Build a NewsItem from one feed record.

        The feed reports 'related' as a comma-separated string and
        'datetime' as epoch milliseconds.

        Args:
            payload (dict[str, Any]): Decoded feed record.

        Returns:
            NewsItem: Parsed item.
        '''

        related = payload.get('related') or ''
        return cls(
            headline=payload['headline'],
            source=payload.get('source', ''),
            url=payload.get('url', ''),
            summary=payload.get('summary', ''),
            related=frozenset(t.strip().upper() for t in related.split(',') if t.strip()),
            published_at=datetime.fromtimestamp(payload['datetime'] / 1000, tz=timezone.utc),
        )

    def relates_to(self, tickers: Iterable[str]) -> bool:

        '''Return True if the item is tagged with any of tickers.'''

        return not self.related.isdisjoint(tickers)


def parse_news(raw: bytes | str) -> list[NewsItem]:

    '''
    Decode a JSON array of feed records.

    Args:
        raw (bytes | str): JSON document from the feed.

    Returns:
        list[NewsItem]: Parsed items in feed order.
    '''

    records = orjson.loads(raw)
    if not isinstance(records, list):
        msg = f'news feed must be a JSON array, got {type(records).__name__}'
        raise ValueError(msg)

    return [NewsItem.from_payload(record) for record in records]


@runtime_checkable
class NewsSource(Protocol):

    '''Feed that returns news items for a set of tickers.'''

    def fetch(self, tickers: Sequence[str]) -> list[NewsItem]:

        '''
        Return news items for the requested tickers.

        Args:
            tickers (Sequence[str]): Normalized upper-case tickers.

        Returns:
            list[NewsItem]: Items, possibly including unrelated ones.
        '''
        ...


class StaticNewsSource:

    '''
    In-memory news source for development data sets.

    Args:
        items (Iterable[NewsItem]): Items served for every request.
    '''

    def __init__(self, items: Iterable[NewsItem]) -> None:

        self._items = tuple(items)

    def fetch(self, tickers: Sequence[str]) -> list[NewsItem]:

        return [item for item in self._items if item.relates_to(tickers)]


class NewsDesk:

    '''
    Serve news about a set of tickers from a NewsSource.

    Args:
        source (NewsSource): Feed to query.
    '''

    def __init__(self, source: NewsSource) -> None:

        self._source = source

    def news_for(self, tickers: str | Sequence[str]) -> list[NewsItem]:

        '''
        Return news related to any of the requested tickers.

        Args:
            tickers (str | Sequence[str]): Comma-separated string or sequence of tickers.

        Returns:
            list[NewsItem]: Items whose related set contains a requested ticker.
        '''

        requested = parse_tickers(tickers)
        items = self._source.fetch(requested)
        related = [item for item in items if item.relates_to(requested)]

        dropped = len(items) - len(related)
        if dropped:
            _log.debug('dropped unrelated news items: count=%s tickers=%s', dropped, ','.join(requested))

        return related
