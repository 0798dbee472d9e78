from budget_tracker.utils.formatters import (
    format_currency,
    format_date,
    month_name,
    short_month_name,
)


def test_format_currency_turkish_separators():
    assert format_currency(1234.5) == "₺1.234,50"
    assert format_currency(1234567.891) == "₺1.234.567,89"


def test_format_currency_small_and_negative():
    assert format_currency(0) == "₺0,00"
    assert format_currency(-3800) == "-₺3.800,00"


def test_format_currency_other_currency():
    assert format_currency(10, "USD") == "$10,00"
    assert format_currency(10, "GBP") == "GBP 10,00"


def test_format_date():
    assert format_date("2025-01-15T09:30:00.000Z") == "15.01.2025 09:30"
    assert format_date("2025-12-01T23:05:00+00:00") == "01.12.2025 23:05"


def test_month_name():
    assert month_name("2025-01") == "Ocak 2025"
    assert month_name("2024-12") == "Aralık 2024"


def test_month_name_invalid_month():
    assert month_name("2025-13") == "Bilinmeyen 2025"
    assert month_name("2025-xx") == "Bilinmeyen 2025"


def test_short_month_name():
    assert short_month_name("2025-08") == "Ağu 25"
    assert short_month_name("2025-00") == "Bil 25"
