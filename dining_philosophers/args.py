"""Command-line argument validation for the simulation."""

from dataclasses import dataclass
from typing import Optional, Sequence

MAX_PHILOSOPHERS = 200

USAGE_MESSAGE = (
    "Wrong usage. Do:\nphilo number_of_philosophers "
    "time_to_die time_to_eat time_to_sleep "
    "[optional: number_of_times_each_philosopher_must_eat]\n"
)

ARGUMENT_ERROR_MESSAGE = (
    "Argument error.\n"
    "All arguments must be positive integers,"
    " there must be at least 1 philo, and philo max number is "
    f"{MAX_PHILOSOPHERS}.\n"
)

_WHITESPACE = " \n\r\t\v\f"
_DIGITS = "0123456789"
_INT_MAX = "2147483647"
_INT_MIN = "-2147483648"


class UsageError(Exception):
    """Raised when the wrong number of arguments is given."""

    exit_code = 0

    def __init__(self, message: str = USAGE_MESSAGE) -> None:
        super().__init__(message)


class ArgumentError(ValueError):
    """Raised when an argument is not an acceptable non-negative integer."""

    exit_code = 1

    def __init__(self, message: str = ARGUMENT_ERROR_MESSAGE) -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Settings:
    """Validated simulation parameters; durations are in microseconds."""

    philosopher_count: int
    time_to_die_us: int
    time_to_eat_us: int
    time_to_sleep_us: int
    meal_target: Optional[int] = None


def _too_long(body: str) -> bool:
    length = len(body)
    if length >= 12:
        return True
    if length == 11:
        sign = body[0]
        if sign == "+":
            return body > "+" + _INT_MAX
        if sign == "-":
            return body > _INT_MIN
        return True
    if length == 10:
        return body > _INT_MAX
    return False


def parse_arg(text: str) -> int:
    """Parse a non-negative integer that fits in a signed 32-bit int.

    Leading whitespace and a single ``+`` are accepted; a minus sign, any
    other character or an out-of-range value raises :class:`ArgumentError`.
    An empty number (for instance ``""`` or ``"+"``) reads as zero.
    """
    body = text.lstrip(_WHITESPACE)
    if _too_long(body):
        raise ArgumentError(f"invalid argument: {text!r}")
    if body.startswith("+"):
        body = body[1:]
    elif body.startswith("-"):
        raise ArgumentError(f"negative argument: {text!r}")
    if any(char not in _DIGITS for char in body):
        raise ArgumentError(f"invalid argument: {text!r}")
    return int(body) if body else 0


def parse_settings(args: Sequence[str]) -> Settings:
    """Build :class:`Settings` from the arguments that follow the program name.

    Expects four or five values: philosopher count, time to die, time to eat,
    time to sleep (all in milliseconds) and an optional meal target.
    """
    if not 4 <= len(args) <= 5:
        raise UsageError()
    try:
        count, die_ms, eat_ms, sleep_ms = (parse_arg(arg) for arg in args[:4])
        meal_target = parse_arg(args[4]) if len(args) == 5 else None
    except ArgumentError:
        raise ArgumentError() from None
    if not 0 < count <= MAX_PHILOSOPHERS:
        raise ArgumentError()
    return Settings(
        philosopher_count=count,
        time_to_die_us=die_ms * 1000,
        time_to_eat_us=eat_ms * 1000,
        time_to_sleep_us=sleep_ms * 1000,
        meal_target=meal_target,
    )