"""Display formatting for amounts, dates and month keys (Turkish locale)."""

from datetime import datetime

MONTH_NAMES = [
    "Ocak", "Şubat", "Mart", "Nisan", "Mayıs", "Haziran",
    "Temmuz", "Ağustos", "Eylül", "Ekim", "Kasım", "Aralık",
]

CURRENCY_SYMBOLS = {"TRY": "₺", "USD": "$", "EUR": "€"}


def format_currency(amount: float, currency: str = "TRY") -> str:
    """Format an amount as ``₺1.234,56`` (dot thousands, comma decimals)."""
    symbol = CURRENCY_SYMBOLS.get(currency, f"{currency} ")
    sign = "-" if amount < 0 else ""
    # Swap separators from the en-US rendering.
    text = f"{abs(amount):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}{symbol}{text}"


def format_date(date_string: str) -> str:
    """``2025-01-15T09:30:00Z`` -> ``15.01.2025 09:30``."""
    value = datetime.fromisoformat(date_string.replace("Z", "+00:00"))
    return value.strftime("%d.%m.%Y %H:%M")


def _split(month_key: str) -> tuple[str, int]:
    year, _, month = month_key.partition("-")
    try:
        index = int(month) - 1
    except ValueError:
        index = -1
    return year, index


def month_name(month_key: str) -> str:
    """``2025-01`` -> ``Ocak 2025``."""
    year, index = _split(month_key)
    name = MONTH_NAMES[index] if 0 <= index < 12 else "Bilinmeyen"
    return f"{name} {year}"


def short_month_name(month_key: str) -> str:
    """``2025-01`` -> ``Oca 25`` (chart labels)."""
    year, index = _split(month_key)
    name = MONTH_NAMES[index][:3] if 0 <= index < 12 else "Bil"
    return f"{name} {year[2:]}"
