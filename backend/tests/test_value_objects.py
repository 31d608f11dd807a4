from decimal import Decimal

import pytest

from domain.value_objects import Money, Pagination, cents_to_dollars, format_currency, total_pages


@pytest.mark.parametrize(
    "cents, expected",
    [
        (125000, "$1,250.00"),
        (0, "$0.00"),
        (666, "$6.66"),
        (-500, "-$5.00"),
        (123456789, "$1,234,567.89"),
    ],
)
def test_money_format(cents, expected) -> None:
    assert Money(cents).format() == expected
    assert str(Money(cents)) == expected


def test_money_to_dollars() -> None:
    assert Money(15795).to_dollars() == 157.95
    assert Money(100).to_dollars() == 1.0


def test_money_rejects_non_integer_cents() -> None:
    with pytest.raises(TypeError):
        Money(1.5)
    with pytest.raises(TypeError):
        Money(True)


def test_money_from_db_accepts_aggregate_types() -> None:
    assert Money.from_db(None) == Money(0)
    assert Money.from_db(Decimal("80385")) == Money(80385)
    assert Money.from_db("125632") == Money(125632)


def test_format_currency_and_cents_to_dollars_helpers() -> None:
    assert format_currency(None) == "$0.00"
    assert format_currency(Decimal("125000")) == "$1,250.00"
    assert cents_to_dollars(20348) == 203.48


@pytest.mark.parametrize(
    "count, expected",
    [(0, 0), (1, 1), (6, 1), (7, 2), (12, 2), (13, 3)],
)
def test_total_pages(count, expected) -> None:
    assert total_pages(count) == expected


def test_total_pages_rejects_bad_page_size() -> None:
    with pytest.raises(ValueError):
        total_pages(10, page_size=0)


def test_pagination_offset() -> None:
    assert Pagination(1).offset == 0
    assert Pagination(3).offset == 12
    assert Pagination(3).limit == 6


def test_pagination_rejects_pages_below_one() -> None:
    with pytest.raises(ValueError):
        Pagination(0)
    with pytest.raises(ValueError):
        Pagination(-4)
