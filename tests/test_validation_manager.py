"""Tests for BMI form validation rules and their messages."""

import pytest

from bmi_tracker.ui_logic.validation_manager import (
    MSG_AGE_RANGE,
    MSG_HEIGHT_RANGE,
    MSG_INVALID_ALL,
    MSG_INVALID_HEIGHT_WEIGHT,
    MSG_NEGATIVE,
    MSG_NEGATIVE_ALL,
    MSG_WEIGHT_RANGE,
    ParsedForm,
    ValidationManager,
)


@pytest.fixture
def vm():
    return ValidationManager()


def test_valid_save_form(vm):
    result, parsed = vm.parse_form("1.75", "70", "30")
    assert result.is_valid
    assert parsed == ParsedForm(height=1.75, weight=70.0, age=30)


def test_blank_age_is_optional_on_save(vm):
    result, parsed = vm.parse_form(" 1.75 ", "70.5", "")
    assert result.is_valid
    assert parsed.age is None


def test_blank_age_rejected_when_required(vm):
    result, parsed = vm.parse_form("1.75", "70", "", require_age=True)
    assert parsed is None
    assert result.first_message() == MSG_INVALID_ALL
    assert [e.field for e in result.errors] == ["age"]


@pytest.mark.parametrize(
    "height, weight, age, message",
    [
        ("abc", "70", "30", MSG_INVALID_ALL),
        ("", "70", "30", MSG_INVALID_ALL),
        ("0", "70", "30", MSG_INVALID_ALL),
        ("1.75", "0", "30", MSG_INVALID_ALL),
        ("1.75", "70", "0", MSG_INVALID_ALL),
        ("1.75", "70", "30.5", MSG_INVALID_ALL),
        ("nan", "70", "30", MSG_INVALID_ALL),
        ("-1.75", "70", "30", MSG_NEGATIVE_ALL),
        ("1.75", "-70", "30", MSG_NEGATIVE_ALL),
        ("1.75", "70", "-5", MSG_NEGATIVE_ALL),
        ("0.4", "70", "30", MSG_HEIGHT_RANGE),
        ("3.01", "70", "30", MSG_HEIGHT_RANGE),
        ("1.75", "9.9", "30", MSG_WEIGHT_RANGE),
        ("1.75", "501", "30", MSG_WEIGHT_RANGE),
        ("1.75", "70", "121", MSG_AGE_RANGE),
    ],
)
def test_save_rules(vm, height, weight, age, message):
    result, parsed = vm.parse_form(height, weight, age)
    assert parsed is None
    assert not result.is_valid
    assert result.first_message() == message


@pytest.mark.parametrize("height, weight", [("0.5", "10"), ("3", "500"), ("3.0", "500.0")])
def test_range_bounds_are_inclusive(vm, height, weight):
    result, parsed = vm.parse_form(height, weight, "1")
    assert result.is_valid
    assert parsed is not None


def test_negative_reported_before_range(vm):
    result, _ = vm.parse_form("-0.1", "700", "30")
    assert result.first_message() == MSG_NEGATIVE_ALL


def test_height_range_reported_before_weight_range(vm):
    result, _ = vm.parse_form("4", "700", "30")
    assert result.first_message() == MSG_HEIGHT_RANGE
    assert len(result.errors) == 1


@pytest.mark.parametrize(
    "height, weight, message",
    [
        ("abc", "70", MSG_INVALID_HEIGHT_WEIGHT),
        ("1.75", "", MSG_INVALID_HEIGHT_WEIGHT),
        ("-1.75", "70", MSG_NEGATIVE),
        ("0.4", "70", MSG_HEIGHT_RANGE),
        ("1.75", "600", MSG_WEIGHT_RANGE),
    ],
)
def test_calculate_only_rules(vm, height, weight, message):
    result, parsed = vm.parse_form(height, weight, for_save=False)
    assert parsed is None
    assert result.first_message() == message


def test_calculate_only_ignores_age(vm):
    result, parsed = vm.parse_form("1.75", "70", "not a number", for_save=False)
    assert result.is_valid
    assert parsed.age is None


def test_numeric_inputs_accepted(vm):
    _, parsed = vm.parse_form(1.8, 80, 40)
    assert parsed == ParsedForm(height=1.8, weight=80.0, age=40)


@pytest.mark.parametrize("weight", ["7_0", "70kg", "0x46", "1,5", "inf", "  "])
def test_non_decimal_text_rejected(vm, weight):
    result, parsed = vm.parse_form("1.75", weight, "")
    assert parsed is None
    assert result.first_message() == MSG_INVALID_ALL


def test_digit_separator_in_height_rejected_as_invalid(vm):
    result, _ = vm.parse_form("1_75", "70", for_save=False)
    assert result.first_message() == MSG_INVALID_HEIGHT_WEIGHT


@pytest.mark.parametrize("text", ["+70", "70.", "7e1", ".7e2", " 70.0 "])
def test_plain_decimal_forms_accepted(vm, text):
    _, parsed = vm.parse_form("1.75", text, for_save=False)
    assert parsed.weight == 70.0


def test_error_str_names_field(vm):
    result, _ = vm.parse_form("0.4", "70", "")
    assert str(result.errors[0]) == f"height: {MSG_HEIGHT_RANGE}"
