import pytest

from philo.parsing import (
    ConfigError,
    SimulationConfig,
    is_numeric,
    parse_arguments,
    parse_int,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("-7", -7),
        ("12abc", 12),
        ("abc", 0),
        ("", 0),
        ("-", 0),
        ("007", 7),
    ],
)
def test_parse_int(text, expected):
    assert parse_int(text) == expected


@pytest.mark.parametrize(
    "args, expected",
    [
        (["5", "800", "200", "200"], True),
        ([], True),
        (["-5"], False),
        (["1a"], False),
        (["5", "8 0"], False),
    ],
)
def test_is_numeric(args, expected):
    assert is_numeric(args) is expected


def test_parse_arguments_without_meal_limit():
    config = parse_arguments(["5", "800", "200", "100"])
    assert config == SimulationConfig(5, 800, 200, 100, None)


def test_parse_arguments_with_meal_limit():
    config = parse_arguments(["4", "410", "200", "200", "7"])
    assert config.thinker_count == 4
    assert config.starvation_time == 410
    assert config.feeding_duration == 200
    assert config.rest_duration == 200
    assert config.required_meals == 7


@pytest.mark.parametrize(
    "args",
    [["5", "800", "200"], ["5", "800", "200", "200", "3", "9"], []],
)
def test_parse_arguments_wrong_count(args):
    with pytest.raises(ConfigError, match="Incorrect argument count"):
        parse_arguments(args)


@pytest.mark.parametrize(
    "args",
    [["0", "800", "200", "200"], ["5", "800", "0", "200"], ["5", "800", "200", "200", "0"]],
)
def test_parse_arguments_non_positive(args):
    with pytest.raises(ConfigError, match="Invalid argument values"):
        parse_arguments(args)


def test_numeric_check_precedes_count_check():
    with pytest.raises(ConfigError, match="Arguments must be numeric values"):
        parse_arguments(["x"])


def test_negative_values_are_rejected_as_non_numeric():
    with pytest.raises(ConfigError, match="Arguments must be numeric values"):
        parse_arguments(["5", "-800", "200", "200"])


def test_config_error_is_value_error():
    with pytest.raises(ValueError):
        parse_arguments(["1"])