'''
Fold a trade log into net positions and a cash balance.

Everything here is a pure function of the trade sequence. Cash is
accumulated in integer cents and only converted to currency units
when reported.
'''

from __future__ import annotations

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

from bddtrader.core.domain.enums import TradeDirection
from bddtrader.core.domain.position import Position
from bddtrader.core.domain.trade import Trade

__all__ = ['CASH_SYMBOL', 'cash_in_cents', 'positions_of', 'to_currency']

CASH_SYMBOL = 'CASH'

_ZERO = Decimal(0)
_CENTS = Decimal('0.01')


def positions_of(trades: Iterable[Trade]) -> list[Position]:

    '''
    Net a trade log into one position per instrument.

    Symbols keep the order in which they first appear in the log. Symbols
    whose net quantity is zero are omitted.

    Args:
        trades (Iterable[Trade]): Trade log in recording order.

    Returns:
        list[Position]: Positions with non-zero net quantity.
    '''

    book: dict[str, tuple[int, Decimal]] = {}

    for trade in trades:
        qty, avg = book.get(trade.symbol, (0, _ZERO))
        delta = trade.signed_quantity
        price = Decimal(trade.price_in_cents)
        new_qty = qty + delta

        flipped = new_qty != 0 and (qty > 0) != (new_qty > 0)
        if qty == 0 or flipped:
            avg = price
        elif (qty > 0) == (delta > 0):
            avg = (abs(qty) * avg + abs(delta) * price) / abs(new_qty)

        book[trade.symbol] = (new_qty, avg)

    return [
        Position(symbol=symbol, quantity=qty, average_price_in_cents=avg)
        for symbol, (qty, avg) in book.items()
        if qty != 0
    ]


def cash_in_cents(trades: Iterable[Trade], cash_symbol: str = CASH_SYMBOL) -> int:

    '''
    Return the cash balance implied by a trade log, in cents.

    Trades in the cash instrument deposit (buy) or withdraw (sell) their
    value. Any other trade settles against cash: a buy spends its value
    and a sell receives it.

    Args:
        trades (Iterable[Trade]): Trade log in recording order.
        cash_symbol (str): Symbol of the synthetic cash instrument.

    Returns:
        int: Cash balance in cents.
    '''

    balance = 0
    for trade in trades:
        value = trade.value_in_cents
        is_buy = trade.direction == TradeDirection.BUY
        if trade.symbol == cash_symbol:
            balance += value if is_buy else -value
        else:
            balance += -value if is_buy else value

    return balance


def to_currency(cents: int) -> Decimal:

    '''Convert integer cents to currency units with two decimals.'''

    return (Decimal(cents) / 100).quantize(_CENTS, rounding=ROUND_HALF_UP)
