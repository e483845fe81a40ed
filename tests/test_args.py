import pytest

from dining_philosophers.args import (
    ARGUMENT_ERROR_MESSAGE,
    MAX_PHILOSOPHERS,
    USAGE_MESSAGE,
    ArgumentError,
    Settings,
    UsageError,
    parse_arg,
    parse_settings,
)


@pytest.mark.parametrize("text", ["42", "1", "800", "2147483647"])
def test_parse_plain_numbers(text):
    assert parse_arg(text) == int(text)


def test_parse_accepts_leading_whitespace_and_plus():
    assert parse_arg(" \t\n+7") == 7


def test_parse_max_with_plus_sign():
    assert parse_arg("+2147483647") == 2147483647


def test_parse_empty_reads_as_zero():
    assert parse_arg("") == 0
    assert parse_arg("+") == 0


@pytest.mark.parametrize(
    "text",
    [
        "-1",
        "-0",
        "2147483648",
        "+2147483648",
        "-2147483648",
        "123456789012",
        "12a",
        "1 ",
        "abc",
        "+-5",
        "1.5",
        "\u0661\u0662",
        "99999999999",
    ],
)
def test_parse_rejects_invalid(text):
    with pytest.raises(ArgumentError):
        parse_arg(text)


def test_argument_error_is_value_error():
    with pytest.raises(ValueError):
        parse_arg("-3")


def test_settings_without_meal_target():
    settings = parse_settings(["5", "800", "200", "300"])
    assert settings.philosopher_count == 5
    assert settings.time_to_die_us // 1000 == 800
    assert settings.time_to_eat_us // 1000 == 200
    assert settings.time_to_sleep_us // 1000 == 300
    assert settings.meal_target is None


def test_settings_with_meal_target():
    settings = parse_settings(["4", "410", "200", "200", "7"])
    assert settings.meal_target == 7
    assert settings.time_to_die_us % 1000 == 0


def test_settings_zero_meal_target_allowed():
    assert parse_settings(["3", "100", "100", "100", "0"]).meal_target == 0


def test_settings_equality_round_trip():
    first = parse_settings(["2", "60", "60", "60"])
    second = parse_settings([" 2", "+60", "60", "60"])
    assert first == second
    assert isinstance(first, Settings)


def test_settings_maximum_philosophers():
    settings = parse_settings([str(MAX_PHILOSOPHERS), "800", "200", "200"])
    assert settings.philosopher_count == MAX_PHILOSOPHERS


@pytest.mark.parametrize(
    "args",
    [
        ["0", "800", "200", "200"],
        [str(MAX_PHILOSOPHERS + 1), "800", "200", "200"],
        ["5", "-800", "200", "200"],
        ["5", "800", "x", "200"],
        ["5", "800", "200", "200", "-1"],
        ["", "800", "200", "200"],
    ],
)
def test_settings_rejects_bad_values(args):
    with pytest.raises(ArgumentError) as info:
        parse_settings(args)
    assert str(info.value) == ARGUMENT_ERROR_MESSAGE
    assert info.value.exit_code == 1


@pytest.mark.parametrize(
    "args",
    [[], ["5"], ["5", "800", "200"], ["5", "800", "200", "200", "3", "9"]],
)
def test_settings_wrong_count(args):
    with pytest.raises(UsageError) as info:
        parse_settings(args)
    assert str(info.value) == USAGE_MESSAGE
    assert info.value.exit_code == 0