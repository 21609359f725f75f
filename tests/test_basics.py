import pytest

from drillrunner.drills.basics import (
    bigger,
    calculate_price,
    classify_character,
    describe_array,
    describe_cat,
    greeting_for,
    is_even,
    middle_slice,
    ring_calls,
    sale_price,
    second_number,
    square,
    times_two,
)


def test_calculate_price():
    assert calculate_price(55) == 55
    assert calculate_price(40) == 80


def test_calculate_price_just_over_threshold():
    assert calculate_price(41) == 41


def test_times_two_positive():
    assert times_two(4) == 8


def test_times_two_negative():
    assert times_two(-4) == -8


def test_ring_calls():
    assert ring_calls(3) == [
        "Ring! Call number 1",
        "Ring! Call number 2",
        "Ring! Call number 3",
    ]
    assert ring_calls(0) == []


def test_is_true_when_even():
    assert is_even(4)


def test_is_false_when_odd():
    assert not is_even(5)


@pytest.mark.parametrize("price, expected", [(51, 48), (50, 40)])
def test_sale_price(price, expected):
    assert sale_price(price) == expected


def test_square():
    assert square(3) == 9
    assert square(-4) == 16


def test_ten_is_bigger_than_eight():
    assert bigger(10, 8) == 10


def test_fortytwo_is_bigger_than_thirtytwo():
    assert bigger(32, 42) == 42


def test_greeting_for():
    assert greeting_for(True, True) == ["Good morning!", "Good evening!"]
    assert greeting_for(False, True) == ["Good evening!"]
    assert greeting_for(False, False) == []


@pytest.mark.parametrize(
    "ch, expected",
    [
        ("C", "Alphabetical!"),
        ("é", "Alphabetical!"),
        ("7", "Numerical!"),
        ("!", "Neither alphabetic nor numeric!"),
    ],
)
def test_classify_character(ch, expected):
    assert classify_character(ch) == expected


def test_classify_character_rejects_strings():
    with pytest.raises(ValueError):
        classify_character("ab")


def test_describe_array():
    assert describe_array([1, 2, 3]) == "Meh, I eat arrays like that for breakfast."
    assert describe_array([0] * 100) == "Wow, that's a big array!"


def test_middle_slice():
    assert middle_slice([1, 2, 3, 4, 5]) == [2, 3, 4]


def test_middle_slice_too_short():
    with pytest.raises(IndexError):
        middle_slice([1, 2, 3])


def test_describe_cat():
    assert describe_cat(("Furry McFurson", 3.5)) == "Furry McFurson is 3.5 years old."


def test_second_number():
    assert second_number((1, 2, 3)) == 2