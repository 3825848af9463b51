import math
import re

import pytest

from seal_schema import MISSING


# ---- boolean ----------------------------------------------------------------

def test_boolean_accepts_bools(seal):
    assert seal.validate(seal.boolean, True) == []
    assert seal.validate(seal.boolean, False) == []


@pytest.mark.parametrize(
    "value, message",
    [
        ("yes", "string is not a boolean"),
        (1, "number is not a boolean"),
        (None, "object is not a boolean"),
        (MISSING, "undefined is not a boolean"),
        ({}, "object is not a boolean"),
    ],
)
def test_boolean_rejects_other_types(seal, value, message):
    assert seal.validate(seal.boolean, value) == [message]


def test_boolean_valid_restricts_values(seal):
    schema = seal.boolean.valid(True)
    assert seal.validate(schema, True) == []
    assert seal.validate(schema, False) == ["false is not allowed"]


def test_validate_without_value_checks_missing(seal):
    assert seal.validate(seal.boolean) == ["undefined is not a boolean"]


# ---- number -----------------------------------------------------------------

@pytest.mark.parametrize(
    "value, message",
    [
        ("5", "5 is not a valid integer number"),
        (True, "true is not a valid integer number"),
        (None, "null is not a valid integer number"),
        (math.nan, "NaN is not a valid integer number"),
        (math.inf, "Infinity is not a valid integer number"),
    ],
)
def test_number_type_check(seal, value, message):
    assert seal.validate(seal.number, value) == [message]


def test_number_accepts_ints_and_floats(seal):
    assert seal.validate(seal.number, 0) == []
    assert seal.validate(seal.number, -3.5) == []


def test_number_accepts_ints_beyond_float_range(seal):
    big = 10 ** 400
    assert seal.validate(seal.number, big) == []
    assert seal.validate(seal.number.integer.gte(0), big) == []
    assert seal.validate(seal.number.lte(100), big) == ["shall be less than or equal to 100"]
    assert seal.validate(seal.any_of(seal.string, seal.number), big) == []


def test_number_short_circuits_at_first_failure(seal):
    schema = seal.number.integer.gte(0).lte(100)
    assert seal.validate(schema, 2.5) == ["shall be an integer"]
    assert seal.validate(schema, -1) == ["shall be greater than or equal to 0"]
    assert seal.validate(schema, 101) == ["shall be less than or equal to 100"]
    assert seal.validate(schema, 50) == []


def test_number_integer_accepts_integral_float(seal):
    assert seal.validate(seal.number.integer, 4.0) == []


def test_number_float(seal):
    assert seal.validate(seal.number.float, 1.5) == []
    assert seal.validate(seal.number.float, 2) == ["shall not be an integer"]
    assert seal.number.double.export_metadata()["type"] == "float"


def test_number_strict_bounds(seal):
    assert seal.validate(seal.number.positive, 0) == ["shall be greater than 0"]
    assert seal.validate(seal.number.negative, 0) == ["shall be less than 0"]
    assert seal.validate(seal.number.gt(1.5), 2) == []
    assert seal.validate(seal.number.lt(1.5), 1.5) == ["shall be less than 1.5"]


def test_number_min_max_aliases(seal):
    schema = seal.number.min(1).max(3)
    assert schema.export_metadata()["minimum"] == 1
    assert schema.export_metadata()["maximum"] == 3
    assert seal.validate(schema, 4) == ["shall be less than or equal to 3"]


def test_number_port(seal):
    schema = seal.number.port
    descriptor = schema.export_metadata()
    assert descriptor["type"] == "integer"
    assert descriptor["format"] == "int32"
    assert seal.validate(schema, 8080) == []
    assert seal.validate(schema, 70000) == ["shall be less than or equal to 65535"]
    assert seal.validate(schema, -1) == ["shall be greater than or equal to 0"]


def test_number_multiple(seal):
    schema = seal.number.multiple(5)
    assert seal.validate(schema, 15) == []
    assert seal.validate(schema, 7) == ["shall be a multiple of 5"]
    assert seal.validate(seal.number.multiple(0), 0) == ["shall be a multiple of 0"]


def test_number_precision(seal):
    schema = seal.number.precision(2)
    assert seal.validate(schema, 1.25) == []
    assert seal.validate(schema, 1.255) == ["shall be accurate to 100"]
    assert schema.export_metadata()["x-precision"] == 2


def test_number_format_records_descriptor_only(seal):
    schema = seal.number.format()
    assert schema.export_metadata()["format"] == "int64"
    assert len(schema.rules) == 1


def test_number_valid_and_invalid(seal):
    assert seal.validate(seal.number.valid(1, 2), 3) == ["3 is not allowed"]
    assert seal.validate(seal.number.valid(1, 2), 2.0) == []
    assert seal.validate(seal.number.invalid(13), 13) == ["13 is not allowed"]


# ---- string -----------------------------------------------------------------

def test_string_type_check(seal):
    assert seal.validate(seal.string, 42) == ["type number is not a string"]
    assert seal.validate(seal.string, MISSING) == ["type undefined is not a string"]


def test_string_rejects_blank_unless_empty(seal):
    assert seal.validate(seal.string, "") == ["empty strings are not allowed"]
    assert seal.validate(seal.string, "   ") == ["empty strings are not allowed"]
    assert seal.validate(seal.string.empty, "") == []


def test_string_empty_applies_after_construction(seal):
    schema = seal.string.max(3)
    schema.empty
    assert seal.validate(schema, "") == []


def test_string_length_rules(seal):
    assert seal.validate(seal.string.min(3), "ab") == ["should be longer than 2 symbols"]
    assert seal.validate(seal.string.max(3), "abcd") == ["should be shorter than 4 symbols"]
    assert seal.validate(seal.string.length(2), "abc") == ["should be 2 symbols long"]
    assert seal.validate(seal.string.length(2, 4), "abcde") == [
        "should be longer than 2 symbols and shorter than 4"
    ]
    assert seal.validate(seal.string.length(2, 4), "abc") == []


def test_string_pattern(seal):
    schema = seal.string.pattern(r"\d+")
    assert seal.validate(schema, "abc123") == []
    assert seal.validate(schema, "abc") == [r"should match \d+"]
    assert schema.export_metadata()["pattern"] == [r"\d+", ""]


def test_string_pattern_with_flags(seal):
    schema = seal.string.pattern(re.compile("^abc$", re.IGNORECASE))
    assert seal.validate(schema, "ABC") == []
    assert schema.export_metadata()["pattern"] == ["^abc$", "i"]


def test_string_affixes(seal):
    assert seal.validate(seal.string.starts_with("ab"), "xab") == ["should start with ab"]
    assert seal.validate(seal.string.ends_with("yz"), "yzx") == ["should end with yz"]
    assert seal.validate(seal.string.includes("mid"), "a-mid-b") == []
    assert seal.validate(seal.string.includes("mid"), "ab") == ["should include mid"]


def test_string_case_and_trim(seal):
    assert seal.validate(seal.string.trim(), " a") == ["should be trimmed"]
    assert seal.validate(seal.string.lowercase(), "aB") == ["should be lowercase"]
    assert seal.validate(seal.string.uppercase(), "AB") == []


@pytest.mark.parametrize(
    "modifier, good, bad",
    [
        ("alphanumeric", "abc123", "abc-123"),
        ("email", "user@example.com", "user@example"),
        ("uuid", "123e4567-e89b-12d3-a456-426614174000", "not-a-uuid"),
        ("ip", "192.168.0.1", "localhost"),
        ("iso_date", "2024-02-29", "29/02/2024"),
        ("date_time", "2024-02-29T10:00:00Z", "2024-02-29"),
    ],
)
def test_string_formats(seal, modifier, good, bad):
    schema = getattr(seal.string, modifier)()
    assert seal.validate(schema, good) == []
    errors = seal.validate(schema, bad)
    assert len(errors) == 1
    assert errors[0].startswith("should match ")


def test_string_uri(seal):
    schema = seal.string.uri()
    assert schema.export_metadata()["format"] == "uri"
    assert seal.validate(schema, "https://example.com/path") == []
    assert seal.validate(schema, "example") == ["should be a valid url"]


def test_string_invalid_values(seal):
    schema = seal.string.invalid("admin", "root")
    assert seal.validate(schema, "root") == ["root is not allowed"]
    assert seal.validate(schema, "guest") == []
