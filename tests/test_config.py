'''
Tests for bddtrader.config.LedgerSettings.
'''

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from bddtrader.config import LedgerSettings
from bddtrader.infrastructure.observability import configure_logging


def test_defaults() -> None:
    settings = LedgerSettings()
    assert settings.funding_symbol == 'CASH'
    assert settings.funding_quantity == 100_000
    assert settings.funding_price_in_cents == 1
    assert settings.log_level == 'INFO'


def test_from_env_reads_prefixed_variables() -> None:
    settings = LedgerSettings.from_env({
        'BDDTRADER_FUNDING_SYMBOL': 'USD',
        'BDDTRADER_FUNDING_QUANTITY': '5000',
        'BDDTRADER_FUNDING_PRICE_IN_CENTS': '2',
        'BDDTRADER_LOG_LEVEL': 'debug',
    })
    assert settings == LedgerSettings(
        funding_symbol='USD',
        funding_quantity=5000,
        funding_price_in_cents=2,
        log_level='DEBUG',
    )


def test_from_env_empty_mapping_gives_defaults() -> None:
    assert LedgerSettings.from_env({}) == LedgerSettings()


def test_from_env_rejects_non_integer() -> None:
    with pytest.raises(ValueError, match='BDDTRADER_FUNDING_QUANTITY must be an integer'):
        LedgerSettings.from_env({'BDDTRADER_FUNDING_QUANTITY': 'lots'})


def test_from_env_loads_dotenv_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / '.env').write_text('BDDTRADER_FUNDING_QUANTITY=42\n')
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv('BDDTRADER_FUNDING_QUANTITY', raising=False)
    try:
        assert LedgerSettings.from_env().funding_quantity == 42
    finally:
        monkeypatch.delenv('BDDTRADER_FUNDING_QUANTITY', raising=False)


@pytest.mark.parametrize('bad', [0, -1])
def test_rejects_non_positive_funding_quantity(bad: int) -> None:
    with pytest.raises(ValueError, match='positive'):
        LedgerSettings(funding_quantity=bad)


def test_rejects_negative_funding_price() -> None:
    with pytest.raises(ValueError, match='non-negative'):
        LedgerSettings(funding_price_in_cents=-1)


def test_rejects_empty_funding_symbol() -> None:
    with pytest.raises(ValueError, match='non-empty'):
        LedgerSettings(funding_symbol='')


def test_rejects_unknown_log_level() -> None:
    with pytest.raises(ValueError, match='log_level'):
        LedgerSettings(log_level='CHATTY')


def test_settings_frozen() -> None:
    settings = LedgerSettings()
    with pytest.raises(AttributeError):
        settings.funding_quantity = 1  # type: ignore[misc]


def test_log_level_drives_logging_setup() -> None:
    settings = LedgerSettings.from_env({'BDDTRADER_LOG_LEVEL': 'warning'})
    configure_logging(settings.log_level)
    assert logging.getLogger().level == logging.WARNING
