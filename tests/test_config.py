import dataclasses

import pytest

from philo.config import InputError, Settings, has_valid_digits, parse_settings


def test_parse_settings_four_arguments():
    settings = parse_settings(["5", "800", "200", "200"])
    assert settings == Settings(5, 800, 200, 200, None)


def test_parse_settings_with_meal_count():
    settings = parse_settings(["5", "800", "200", "200", "7"])
    assert settings.meals_required == 7
    assert settings.number_of_philosophers == 5


def test_parse_settings_accepts_plus_sign_and_leading_space():
    settings = parse_settings(["+4", " 410", "200", "200"])
    assert settings.number_of_philosophers == 4
    assert settings.time_to_die == 410


def test_settings_are_frozen():
    settings = parse_settings(["1", "800", "200", "200"])
    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.time_to_die = 1
    assert settings.time_to_die == 800


@pytest.mark.parametrize(
    "args",
    [[], ["5", "800", "200"], ["5", "800", "200", "200", "7", "9"]],
)
def test_wrong_argument_count(args):
    with pytest.raises(InputError, match="Error: Invalid number of arguments."):
        parse_settings(args)


@pytest.mark.parametrize(
    "args, message",
    [
        (["0", "800", "200", "200"], "Error: Invalid philosophers number"),
        (["5", "-800", "200", "200"], "Error: Invalid time to die"),
        (["5", "800", "abc", "200"], "Error: Invalid time to eat"),
        (["5", "800", "200", "0"], "Error: Invalid time to sleep"),
        (["5", "800", "200", "200", "0"], "Error: Invalid number of times must eat"),
    ],
)
def test_non_positive_values_are_rejected(args, message):
    with pytest.raises(InputError) as excinfo:
        parse_settings(args)
    assert str(excinfo.value) == message


def test_trailing_garbage_adds_notice():
    with pytest.raises(InputError) as excinfo:
        parse_settings(["5", "800x", "200", "200"])
    assert str(excinfo.value) == (
        "All arguments must be positive integers.\nError: Invalid time to die"
    )


def test_first_invalid_argument_wins():
    with pytest.raises(InputError) as excinfo:
        parse_settings(["5", "0", "0", "0"])
    assert str(excinfo.value) == "Error: Invalid time to die"


def test_maximum_philosophers_allowed():
    assert parse_settings(["200", "800", "200", "200"]).number_of_philosophers == 200


def test_too_many_philosophers():
    with pytest.raises(InputError, match=r"Too many philosophers \(max 200\)"):
        parse_settings(["201", "800", "200", "200"])


@pytest.mark.parametrize("arg", ["5", "+5", "-5", "a5", "", "123"])
def test_has_valid_digits_true(arg):
    assert has_valid_digits(arg) is True


@pytest.mark.parametrize("arg", ["5a", "1 2", "12.5", "++5"])
def test_has_valid_digits_false(arg):
    assert has_valid_digits(arg) is False


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_settings(["x"])