"""Command-line argument parsing and validation for the simulation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence


class ConfigError(ValueError):
    """Raised when the simulation arguments are malformed or out of range."""


@dataclass(frozen=True)
class SimulationConfig:
    """Parameters of one dinner, times in milliseconds.

    ``required_meals`` is ``None`` when the dinner runs until someone starves.
    """

    thinker_count: int
    starvation_time: int
    feeding_duration: int
    rest_duration: int
    required_meals: Optional[int] = None


def parse_int(text: str) -> int:
    """Read an optional leading '-' and the digits that follow it.

    Parsing stops at the first non-digit; text with no leading digits gives 0.
    """
    sign = 1
    if text.startswith("-"):
        sign = -1
        text = text[1:]
    result = 0
    for char in text:
        if not "0" <= char <= "9":
            break
        result = result * 10 + (ord(char) - ord("0"))
    return sign * result


def is_numeric(args: Sequence[str]) -> bool:
    """Return True if every argument consists of ASCII digits only."""
    return all("0" <= char <= "9" for arg in args for char in arg)


def parse_arguments(args: Sequence[str]) -> SimulationConfig:
    """Validate the arguments (program name excluded) and build a config.

    Expects: thinker count, time to die, time to eat, time to sleep and,
    optionally, the number of meals each thinker must eat.
    """
    if not is_numeric(args):
        raise ConfigError("Arguments must be numeric values")
    if not 4 <= len(args) <= 5:
        raise ConfigError("Incorrect argument count")
    values = [parse_int(arg) for arg in args]
    if any(value <= 0 for value in values):
        raise ConfigError("Invalid argument values")
    count, starvation, feeding, rest, *rest_args = values
    required_meals: Optional[int] = None
    if rest_args:
        required_meals = rest_args[0]
        if required_meals <= 0:
            raise ConfigError("Invalid meal requirement")
    return SimulationConfig(
        thinker_count=count,
        starvation_time=starvation,
        feeding_duration=feeding,
        rest_duration=rest,
        required_meals=required_meals,
    )