'''
Tests for bddtrader.infrastructure.news_source.
'''

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone

import orjson
import pytest

from bddtrader.infrastructure.news_source import (
    NewsDesk,
    NewsItem,
    NewsSource,
    StaticNewsSource,
    parse_news,
    parse_tickers,
)

_TS = datetime(2026, 1, 1, tzinfo=timezone.utc)

_FEED = orjson.dumps([
    {
        'datetime': 1767225600000,
        'headline': 'Apple unveils new hardware',
        'source': 'Newswire',
        'url': 'https://news.example/apple',
        'summary': 'Keynote recap.',
        'related': 'AAPL',
    },
    {
        'datetime': 1767225660000,
        'headline': 'Ad market rebounds',
        'source': 'Newswire',
        'url': 'https://news.example/ads',
        'summary': '',
        'related': 'FB,GOOGL',
    },
    {
        'datetime': 1767225720000,
        'headline': 'Search antitrust ruling',
        'source': 'Courts Daily',
        'url': 'https://news.example/search',
        'summary': 'Ruling due.',
        'related': 'googl, msft',
    },
])


def _item(headline: str = 'headline', related: frozenset[str] = frozenset({'AAPL'})) -> NewsItem:
    return NewsItem(
        headline=headline,
        source='Newswire',
        url='https://news.example/item',
        summary='',
        related=related,
        published_at=_TS,
    )


class _UnfilteredSource:

    '''Source that ignores the requested tickers.'''

    def __init__(self, items: list[NewsItem]) -> None:
        self.items = items
        self.requests: list[tuple[str, ...]] = []

    def fetch(self, tickers: Sequence[str]) -> list[NewsItem]:
        self.requests.append(tuple(tickers))
        return list(self.items)


# --- tickers ---


def test_parse_tickers_from_comma_string() -> None:
    assert parse_tickers('FB,GOOGL') == ('FB', 'GOOGL')


def test_parse_tickers_normalizes_and_deduplicates() -> None:
    assert parse_tickers(' fb , GOOGL,fb,, ') == ('FB', 'GOOGL')
    assert parse_tickers(['aapl', 'AAPL', 'msft']) == ('AAPL', 'MSFT')


@pytest.mark.parametrize('bad', ['', ' , ', []])
def test_parse_tickers_rejects_empty(bad: str | list[str]) -> None:
    with pytest.raises(ValueError, match='ticker'):
        parse_tickers(bad)


# --- items ---


def test_parse_news_reads_feed() -> None:
    items = parse_news(_FEED)
    assert [i.headline for i in items] == [
        'Apple unveils new hardware',
        'Ad market rebounds',
        'Search antitrust ruling',
    ]
    assert items[1].related == frozenset({'FB', 'GOOGL'})
    assert items[2].related == frozenset({'GOOGL', 'MSFT'})
    assert items[0].published_at == datetime(2026, 1, 1, tzinfo=timezone.utc)


def test_parse_news_rejects_non_array() -> None:
    with pytest.raises(ValueError, match='JSON array'):
        parse_news(b'{"headline": "x"}')


def test_news_item_requires_aware_timestamp() -> None:
    with pytest.raises(ValueError, match='timezone-aware'):
        NewsItem('h', 's', 'u', '', frozenset(), datetime(2026, 1, 1))


def test_news_item_requires_headline() -> None:
    with pytest.raises(ValueError, match='headline'):
        _item(headline='')


def test_news_item_relates_to() -> None:
    item = _item(related=frozenset({'FB', 'GOOGL'}))
    assert item.relates_to(['GOOGL']) is True
    assert item.relates_to(['AAPL']) is False


# --- desk ---


def test_static_source_satisfies_protocol() -> None:
    assert isinstance(StaticNewsSource([]), NewsSource)


def test_news_for_single_ticker() -> None:
    desk = NewsDesk(StaticNewsSource(parse_news(_FEED)))
    news = desk.news_for('AAPL')
    assert news
    for item in news:
        assert 'AAPL' in item.related


def test_news_for_multiple_tickers() -> None:
    desk = NewsDesk(StaticNewsSource(parse_news(_FEED)))
    news = desk.news_for('FB,GOOGL')
    assert len(news) == 2
    for item in news:
        assert 'FB' in item.related or 'GOOGL' in item.related


def test_every_requested_ticker_with_news_is_covered() -> None:
    desk = NewsDesk(StaticNewsSource(parse_news(_FEED)))
    requested = ['AAPL', 'FB', 'MSFT']
    news = desk.news_for(requested)
    for ticker in requested:
        assert any(ticker in item.related for item in news)


def test_news_desk_drops_unrelated_items() -> None:
    source = _UnfilteredSource([_item('apple'), _item('other', frozenset({'TSLA'}))])
    news = NewsDesk(source).news_for('aapl')
    assert [i.headline for i in news] == ['apple']
    assert source.requests == [('AAPL',)]


def test_news_for_unknown_ticker_is_empty() -> None:
    desk = NewsDesk(StaticNewsSource(parse_news(_FEED)))
    assert desk.news_for('ZZZZ') == []
