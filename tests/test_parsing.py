import pytest

from pushswap.parsing import (
    INT_MAX,
    INT_MIN,
    InputError,
    check_arguments,
    has_duplicates,
    lenient_atoi,
    parse_arguments,
    parse_number,
    split_words,
)


def test_split_words_drops_empty_words():
    assert split_words("  3 1   2 ") == ["3", "1", "2"]


def test_split_words_empty_text():
    assert split_words("") == []
    assert split_words("    ") == []


def test_split_words_only_spaces_separate():
    assert split_words("1\t2 3") == ["1\t2", "3"]


@pytest.mark.parametrize("text", ["0", "42", "-7", "+15", "2147483647", "-2147483648"])
def test_parse_number_round_trip(text):
    assert parse_number(text) == int(text)


def test_parse_number_leading_whitespace():
    assert parse_number(" \t\n-5") == -5


def test_parse_number_limits():
    assert parse_number(str(INT_MAX)) == INT_MAX
    assert parse_number(str(INT_MIN)) == INT_MIN


@pytest.mark.parametrize("text", ["2147483648", "-2147483649", "99999999999999999999"])
def test_parse_number_out_of_range(text):
    with pytest.raises(InputError):
        parse_number(text)


@pytest.mark.parametrize("text", ["12a", "1 ", "--1", "+-1", "1.5", "abc", "1-2"])
def test_parse_number_rejects_garbage(text):
    with pytest.raises(InputError):
        parse_number(text)


def test_parse_number_bare_sign_is_zero():
    assert parse_number("-") == 0
    assert parse_number("") == 0


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_number("x")


def test_lenient_atoi_stops_at_non_digit():
    assert lenient_atoi("  -12abc") == -12
    assert lenient_atoi("+34 56") == 34


def test_lenient_atoi_no_digits():
    assert lenient_atoi("abc") == 0
    assert lenient_atoi("--5") == 0


def test_lenient_atoi_wraps_like_int():
    assert lenient_atoi("2147483648") == INT_MIN
    assert lenient_atoi(str(INT_MAX)) == INT_MAX
    assert lenient_atoi(str(INT_MIN)) == INT_MIN


@pytest.mark.parametrize("text", ["0", "17", "-3", "2147483647"])
def test_lenient_atoi_agrees_with_strict_on_plain_numbers(text):
    assert lenient_atoi(text) == parse_number(text)


def test_check_arguments_accepts_plain_numbers():
    assert check_arguments(["1", "-2", "+3", "4 5 6"]) is True


def test_check_arguments_rejects_bad_signs():
    assert check_arguments(["-"]) is False
    assert check_arguments(["1+"]) is False
    assert check_arguments(["1-2"]) is False


@pytest.mark.parametrize("arg", ["1a", "x", "1.0", "3,4", "5/2", "!"])
def test_check_arguments_raises_on_forbidden_characters(arg):
    with pytest.raises(InputError):
        check_arguments(["1", arg])


def test_check_arguments_empty_list():
    assert check_arguments([]) is True


def test_parse_arguments_several():
    assert parse_arguments(["3", "-1", "2"]) == [3, -1, 2]


def test_parse_arguments_single_quoted():
    assert parse_arguments(["3 -1  2"]) == [3, -1, 2]


def test_parse_arguments_single_number():
    assert parse_arguments(["8"]) == [8]


def test_parse_arguments_single_blank_gives_nothing():
    assert parse_arguments(["   "]) == []


def test_parse_arguments_none_raises():
    with pytest.raises(InputError):
        parse_arguments([])


def test_parse_arguments_bad_word_raises():
    with pytest.raises(InputError):
        parse_arguments(["1 two 3"])
    with pytest.raises(InputError):
        parse_arguments(["1", "2147483648"])


def test_parse_arguments_preserves_order():
    words = ["5", "4", "9", "-2", "0"]
    assert parse_arguments(words) == parse_arguments([" ".join(words)])


def test_has_duplicates():
    assert has_duplicates([1, 2, 3, 1]) is True
    assert has_duplicates([1, 2, 3]) is False
    assert has_duplicates([]) is False


def test_has_duplicates_accepts_generators():
    assert has_duplicates(n % 3 for n in range(4)) is True
    assert has_duplicates(n for n in range(4)) is False