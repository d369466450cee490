from decimal import Decimal

import pytest

from ens_pricing.domain.monetary.currency_registry import DAI, ETH, USD, USDC
from ens_pricing.domain.monetary.price import (
    Price,
    add_prices,
    approx_scale_price,
    convert_currency_with_rates,
    formatted_price,
    multiply_price_by_number,
    number_as_price,
    price_as_number,
    subtract_prices,
)
from ens_pricing.errors import CurrencyMismatch, InvalidNumber, InvalidScalar, UnknownCurrency
from tests.helpers.helper_prices import create_eth_price, create_exchange_rates, create_usd_price

# region Construction


def test_price_holds_scaled_integer():
    price = Price(10050, USD)

    assert price.value == 10050
    assert price.currency == USD
    assert str(price) == "100.50 USD"
    assert repr(price) == "Price(10050, USD)"


@pytest.mark.parametrize("value", [1.5, "100", Decimal("1"), True])
def test_price_rejects_non_int_values(value):
    with pytest.raises(InvalidNumber):
        Price(value, USD)


def test_price_rejects_non_currency():
    with pytest.raises(TypeError):
        Price(100, "USD")


def test_str_keeps_every_decimal():
    assert str(Price(0, USD)) == "0.00 USD"
    assert str(Price(-5, USD)) == "-0.05 USD"
    assert str(Price(1, ETH)) == "0.000000000000000001 ETH"


# endregion

# region number_as_price / price_as_number


@pytest.mark.parametrize(
    ("number", "currency", "expected_value"),
    [
        (100.5, USD, 10050),
        ("100.50", USD, 10050),
        (Decimal("0.005"), USD, 1),  # half-up
        ("-1.005", USD, -101),  # half-up, away from zero
        (1e-07, ETH, 100_000_000_000),
        ("0.125", ETH, 125 * 10**15),
        (2, USDC, 2_000_000),
        ("1_000", USD, 100_000),
    ],
)
def test_number_as_price(number, currency, expected_value):
    assert number_as_price(number, currency) == Price(expected_value, currency)


@pytest.mark.parametrize("number", ["abc", "", float("nan"), float("inf"), True, None])
def test_number_as_price_rejects_malformed_numbers(number):
    with pytest.raises(InvalidNumber):
        number_as_price(number, USD)


def test_number_as_price_rejects_unknown_currency():
    with pytest.raises(UnknownCurrency):
        number_as_price(1, "EUR")


@pytest.mark.parametrize(
    ("number", "currency"),
    [
        ("0", USD),
        ("123.45", USD),
        ("-0.01", USD),
        ("999999999.99", USD),
        ("0.000001", USDC),
        ("-42.5", USDC),
        ("0.99999703", DAI),
        ("1.000000000000000001", ETH),
        ("-0.125", ETH),
        ("123456789012345678.123456789012345678", ETH),
    ],
)
def test_number_as_price_round_trip(number, currency):
    price = number_as_price(number, currency)

    # Exact in decimal, and as close as a float gets
    assert Decimal(str(price).split()[0]) == Decimal(number)
    assert price_as_number(price) == float(number)


def test_number_as_price_handles_very_large_numbers():
    assert number_as_price(1e83, ETH) == Price(10**101, ETH)
    assert number_as_price("1e500", USD) == Price(10**502, USD)


def test_number_as_price_rejects_numbers_beyond_decimal_range():
    with pytest.raises(InvalidNumber):
        number_as_price("1e999999", USD)


def test_very_large_prices_keep_every_digit():
    price = Price(10**120 + 1, USD)

    assert str(price).endswith("0.01 USD")
    assert formatted_price(price) == "999,999,999.99+"


def test_price_as_number():
    assert price_as_number(Price(10050, USD)) == 100.5
    assert price_as_number(Price(5 * 10**17, ETH)) == 0.5
    assert price_as_number(Price(0, DAI)) == 0.0


# endregion

# region Arithmetic


def test_add_prices():
    prices = [create_usd_price("1.10"), create_usd_price("2.20"), create_usd_price("-0.30")]

    assert add_prices(prices) == create_usd_price("3.00")
    assert create_usd_price("1.10") + create_usd_price("2.20") == create_usd_price("3.30")


def test_add_prices_rejects_empty_sequence():
    with pytest.raises(InvalidNumber):
        add_prices([])


def test_add_prices_rejects_mixed_currencies():
    with pytest.raises(CurrencyMismatch) as exc_info:
        add_prices([create_usd_price("1"), create_eth_price("1")])

    assert exc_info.value.currencies == [USD, ETH]
    assert exc_info.value.operation == "add"


def test_subtract_prices_may_go_negative():
    assert subtract_prices(create_usd_price("1.00"), create_usd_price("2.50")) == create_usd_price("-1.50")
    assert create_usd_price("5") - create_usd_price("5") == Price.zero(USD)


@pytest.mark.parametrize(
    ("price1", "price2"),
    [
        (Price(10050, USD), Price(1, USD)),
        (Price(-500, USD), Price(250, USD)),
        (Price(0, USDC), Price(-1_000_000, USDC)),
        (Price(1, ETH), Price(10**18 - 1, ETH)),
        (Price(10**36 + 7, ETH), Price(-(10**30), ETH)),
    ],
)
def test_subtract_prices_undoes_add_prices(price1, price2):
    assert subtract_prices(add_prices([price1, price2]), price2) == price1
    assert (price1 + price2) - price2 == price1


def test_subtract_prices_rejects_mixed_currencies():
    with pytest.raises(CurrencyMismatch):
        subtract_prices(create_usd_price("1"), Price(1, USDC))


def test_multiply_price_by_number():
    assert multiply_price_by_number(Price(10050, USD), 1.5) == Price(15075, USD)
    assert Price(10050, USD) * 2 == Price(20100, USD)
    assert 2 * Price(10050, USD) == Price(20100, USD)


def test_multiply_price_rounds_scalar_to_currency_decimals_then_truncates():
    # 0.333 becomes 0.33, and 3.33 * 0.33 = 1.0989 truncates to 1.09
    assert multiply_price_by_number(Price(333, USD), 0.333) == Price(109, USD)
    assert multiply_price_by_number(Price(-333, USD), 0.333) == Price(-109, USD)


def test_multiply_price_by_price_is_not_supported():
    with pytest.raises(TypeError):
        Price(1, USD) * Price(1, USD)


def test_negation_and_absolute_value():
    assert -Price(100, USD) == Price(-100, USD)
    assert abs(Price(-100, USD)) == Price(100, USD)


# endregion

# region Comparison


def test_comparison_within_currency():
    assert create_usd_price("1") < create_usd_price("2")
    assert create_usd_price("2") >= create_usd_price("2")
    assert max([create_usd_price("3"), create_usd_price("7"), create_usd_price("5")]) == create_usd_price("7")


def test_ordering_across_currencies_raises():
    with pytest.raises(CurrencyMismatch):
        assert create_usd_price("1") < create_eth_price("1")


def test_equality_across_currencies_is_false():
    assert Price(100, USD) != Price(100, USDC)
    assert Price(100, USD) != 100
    assert len({Price(100, USD), Price(100, USD), Price(100, USDC)}) == 2


# endregion

# region Scaling


def test_approx_scale_price():
    assert approx_scale_price(Price(100, USD), 0.5) == Price(50, USD)
    assert approx_scale_price(Price(100, USD), 0.75, 1) == Price(70, USD)
    assert approx_scale_price(Price(10_000_000_000, USD), 0.5**21) == Price(4768, USD)


def test_approx_scale_price_rejects_invalid_inputs():
    with pytest.raises(InvalidScalar):
        approx_scale_price(Price(100, USD), float("nan"))
    with pytest.raises(InvalidScalar):
        approx_scale_price(Price(100, USD), 0.5, -1)


# endregion

# region Currency conversion


def test_convert_eth_to_usd():
    half_eth = create_eth_price("0.5")

    assert convert_currency_with_rates(half_eth, USD, create_exchange_rates()) == create_usd_price("1000")


def test_convert_accepts_plain_dict():
    rates = {ETH: 2000.0, USD: 1.0}

    assert convert_currency_with_rates(create_eth_price("0.5"), USD, rates) == create_usd_price("1000")


def test_convert_to_same_currency_returns_price_unchanged():
    price = create_usd_price("123.45")

    assert convert_currency_with_rates(price, USD, create_exchange_rates()) == price


def test_convert_round_trip_from_coarse_currency_stays_within_one_unit():
    original = create_usd_price("100.50")
    rates = create_exchange_rates()

    as_dai = convert_currency_with_rates(original, DAI, rates)
    back = convert_currency_with_rates(as_dai, USD, rates)

    assert as_dai.currency == DAI
    assert abs(back.value - original.value) <= 1


def test_convert_with_missing_rate_raises():
    rates = {USD: 1.0}

    with pytest.raises(UnknownCurrency):
        convert_currency_with_rates(create_usd_price("1"), DAI, rates)
    with pytest.raises(UnknownCurrency):
        convert_currency_with_rates(create_eth_price("1"), ETH, rates)


# endregion

# region Parsing


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("1000.50 USD", Price(100050, USD)),
        ("$1,000.50", Price(100050, USD)),
        ("$1,000.50 USD", Price(100050, USD)),
        ("Ξ0.125 ETH", Price(125 * 10**15, ETH)),
        ("  2 usdc ", Price(2_000_000, USDC)),
    ],
)
def test_price_from_str(text, expected):
    assert Price.from_str(text) == expected


@pytest.mark.parametrize("text", ["", "100", "$5 ETH", "1 2 USD"])
def test_price_from_str_rejects_malformed_text(text):
    with pytest.raises(InvalidNumber):
        Price.from_str(text)


def test_price_from_str_rejects_unknown_acronym():
    with pytest.raises(UnknownCurrency):
        Price.from_str("1 EUR")


# endregion
