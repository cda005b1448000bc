"""Command-line settings for the dining philosophers simulation."""

from dataclasses import dataclass
from typing import Optional, Sequence

from philo.timing import parse_leading_int

MAX_PHILOSOPHERS = 200
_DIGITS_NOTICE = "All arguments must be positive integers."


class InputError(ValueError):
    """Raised when the command-line arguments cannot be used."""


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation run; times are in milliseconds."""

    number_of_philosophers: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meals_required: Optional[int] = None


def has_valid_digits(arg: str) -> bool:
    """Tell whether every character after the first one is a decimal digit."""
    return all("0" <= char <= "9" for char in arg[1:])


def _checked(arg: str, error: str) -> int:
    value = parse_leading_int(arg)
    if value <= 0:
        raise InputError(error)
    if not has_valid_digits(arg):
        raise InputError(f"{_DIGITS_NOTICE}\n{error}")
    return value


def parse_settings(args: Sequence[str]) -> Settings:
    """Build settings from the arguments that follow the program name.

    Four or five arguments are expected: number of philosophers, time to die,
    time to eat, time to sleep and, optionally, how many times each must eat.
    """
    if not 4 <= len(args) <= 5:
        raise InputError("Error: Invalid number of arguments.")

    count = _checked(args[0], "Error: Invalid philosophers number")
    time_to_die = _checked(args[1], "Error: Invalid time to die")
    time_to_eat = _checked(args[2], "Error: Invalid time to eat")
    time_to_sleep = _checked(args[3], "Error: Invalid time to sleep")
    meals = None
    if len(args) == 5:
        meals = _checked(args[4], "Error: Invalid number of times must eat")

    if count > MAX_PHILOSOPHERS:
        raise InputError("Error: Too many philosophers (max 200).")

    return Settings(
        number_of_philosophers=count,
        time_to_die=time_to_die,
        time_to_eat=time_to_eat,
        time_to_sleep=time_to_sleep,
        meals_required=meals,
    )