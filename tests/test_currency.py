import pytest

from core.currency import CURRENCIES, currency_info, format_compact, format_currency, is_known_currency


def test_lookup_is_case_insensitive():
    info = currency_info("inr")
    assert info.code == "INR"
    assert info.symbol == "₹"
    assert info.locale == "en-IN"


@pytest.mark.parametrize("code", ["XYZ", "", None])
def test_unknown_codes_fall_back_to_usd(code):
    info = currency_info(code)
    assert info.code == "USD"
    assert info.locale == "en-US"
    assert not is_known_currency(code)


def test_table_is_read_only():
    with pytest.raises(TypeError):
        CURRENCIES["BTC"] = CURRENCIES["USD"]


def test_format_currency():
    assert format_currency(1234.6, "EUR") == "€1,235"
    assert format_currency(-1000, "USD") == "-$1,000"
    assert format_currency(0.4, "JPY") == "¥0"
    assert format_currency(5, "nope") == "$5"


def test_format_compact():
    assert format_compact(12500, "USD") == "$12.5k"
    assert format_compact(1_200_000, "AUD") == "A$1.2M"
    assert format_compact(950, "CAD") == "C$950"
