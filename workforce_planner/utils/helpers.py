import math
from datetime import datetime, timezone


def round_half_up(value: float, ndigits: int = 0) -> float:
    """
    Round like a spreadsheet does (0.5 always goes up), unlike the built-in
    round() which rounds halves to even.
    """
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def round2(value: float) -> float:
    return round_half_up(value, 2)


def to_vnd(value: float) -> int:
    """Whole-dong amount."""
    return int(round_half_up(value))


def format_number(num: float) -> str:
    """
    Vietnamese thousands separator:
    1234567 -> "1.234.567"
    """
    return f"{int(round_half_up(num)):,}".replace(",", ".")


def format_vnd(amount: float) -> str:
    return f"{format_number(amount)} ₫"


def utcnow() -> datetime:
    """Timezone-aware current UTC time for timestamp columns."""
    return datetime.now(timezone.utc)
