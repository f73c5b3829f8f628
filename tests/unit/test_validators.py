"""
Unit tests for field rule validators.

Includes property-based testing with hypothesis for validators.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from src.core.validators import (
    AllowedValuesValidator,
    LengthValidator,
    PatternValidator,
    RangeValidator,
    RequiredFieldValidator,
    RoundValidator,
    TypeValidator,
    ValidationError,
)
from src.core.validators.base_validator import format_value


class TestRequiredFieldValidator:
    """Tests for RequiredFieldValidator"""

    def test_valid_required_field(self):
        """Test validation passes for present field"""
        validator = RequiredFieldValidator("name")
        record = {"name": "John Doe"}
        validator.validate(record["name"], record)  # Should not raise

    def test_missing_field_raises_error(self):
        """Test validation fails for missing field"""
        validator = RequiredFieldValidator("name")
        record = {"age": 30}

        with pytest.raises(ValidationError) as exc_info:
            validator.validate(None, record)

        assert exc_info.value.message == "Field name is required."
        assert exc_info.value.field_name == "name"
        assert exc_info.value.rule_name == "required_field"

    def test_null_field_raises_error(self):
        """Test validation fails for null field"""
        validator = RequiredFieldValidator("name")
        record = {"name": None}

        with pytest.raises(ValidationError):
            validator.validate(record["name"], record)

    def test_empty_string_counts_as_present(self):
        """Test empty string passes the required check"""
        validator = RequiredFieldValidator("name")
        record = {"name": ""}
        validator.validate(record["name"], record)  # Should not raise

    def test_exception_text_includes_rule_and_field(self):
        error = ValidationError("range", "age", "Field age should be at most 65.")
        assert str(error) == "[range] age: Field age should be at most 65."


class TestTypeValidator:
    """Tests for TypeValidator"""

    def test_integer_accepts_integer_strings(self):
        validator = TypeValidator("age", {"expected_type": "integer"})
        validator.validate(25, {})
        validator.validate("25", {})  # Should not raise

    def test_integer_rejects_decimals(self):
        validator = TypeValidator("age", {"expected_type": "integer"})

        with pytest.raises(ValidationError) as exc_info:
            validator.validate(25.5, {})

        assert exc_info.value.message == "Field age should be an integer."

    def test_string_rejects_numbers(self):
        validator = TypeValidator("name", {"expected_type": "string"})

        with pytest.raises(ValidationError) as exc_info:
            validator.validate(42, {})

        assert exc_info.value.message == "Field name should be a string."

    def test_object_requires_mapping(self):
        validator = TypeValidator("addr", {"expected_type": "object"})
        validator.validate({"zip": "12345"}, {})

        with pytest.raises(ValidationError) as exc_info:
            validator.validate("12 Main St", {})

        assert exc_info.value.message == "Field addr should be an object."

    def test_lists_are_not_objects(self):
        validator = TypeValidator("addr", {"expected_type": "object"})
        with pytest.raises(ValidationError):
            validator.validate(["12345"], {})

    def test_missing_expected_type_raises_value_error(self):
        with pytest.raises(ValueError, match="expected_type"):
            TypeValidator("age")

    def test_unsupported_expected_type_raises_value_error(self):
        with pytest.raises(ValueError, match="Unsupported type"):
            TypeValidator("age", {"expected_type": "uuid"})

    @given(st.integers())
    def test_property_any_integer_passes(self, value):
        """Property test: any integer passes the integer check"""
        TypeValidator("n", {"expected_type": "integer"}).validate(value, {})

    @given(st.text())
    def test_property_any_text_passes_string_check(self, value):
        """Property test: any str passes the string check"""
        TypeValidator("s", {"expected_type": "string"}).validate(value, {})


class TestRangeValidator:
    """Tests for RangeValidator"""

    def test_value_within_range(self):
        validator = RangeValidator("age", {"min": 18, "max": 65})
        validator.validate(18, {})
        validator.validate(65, {})

    def test_value_below_minimum(self):
        validator = RangeValidator("age", {"min": 18})

        with pytest.raises(ValidationError) as exc_info:
            validator.validate(17, {})

        assert exc_info.value.message == "Field age should be at least 18."

    def test_value_above_maximum(self):
        validator = RangeValidator("age", {"max": 65})

        with pytest.raises(ValidationError) as exc_info:
            validator.validate(70, {})

        assert exc_info.value.message == "Field age should be at most 65."

    def test_fractional_bound_in_message(self):
        validator = RangeValidator("ratio", {"max": 0.5})

        with pytest.raises(ValidationError) as exc_info:
            validator.validate(0.75, {})

        assert exc_info.value.message == "Field ratio should be at most 0.5."

    def test_numeric_strings_are_compared_as_numbers(self):
        RangeValidator("age", {"min": 18}).validate("30", {})

    def test_non_numeric_value_fails_minimum(self):
        with pytest.raises(ValidationError):
            RangeValidator("age", {"min": 0}).validate("abc", {})

    def test_requires_a_bound(self):
        with pytest.raises(ValueError, match="at least one of"):
            RangeValidator("age", {})

    @given(st.floats(min_value=0, max_value=100, allow_nan=False, allow_infinity=False))
    def test_property_values_within_range_pass(self, value):
        """Property test: values within [0, 100] should pass"""
        RangeValidator("score", {"min": 0, "max": 100}).validate(value, {})

    @given(st.floats(max_value=-0.01, allow_nan=False, allow_infinity=False))
    def test_property_values_below_minimum_fail(self, value):
        """Property test: negative values fail a zero minimum"""
        with pytest.raises(ValidationError):
            RangeValidator("score", {"min": 0}).validate(value, {})


class TestRoundValidator:
    """Tests for RoundValidator"""

    def test_whole_numbers_pass(self):
        validator = RoundValidator("qty")
        validator.validate(3, {})
        validator.validate(3.0, {})
        validator.validate("3", {})

    def test_decimal_fails(self):
        with pytest.raises(ValidationError) as exc_info:
            RoundValidator("qty").validate(3.5, {})

        assert exc_info.value.message == "Field qty should be a rounded number without decimal points."

    def test_non_numeric_values_are_skipped(self):
        RoundValidator("qty").validate("three", {})  # Should not raise


class TestLengthValidator:
    """Tests for LengthValidator"""

    def test_min_length(self):
        validator = LengthValidator("policy", {"min_length": 5})
        validator.validate("POL12", {})

        with pytest.raises(ValidationError) as exc_info:
            validator.validate("POL", {})

        assert exc_info.value.message == "Field policy should have at least 5 characters."

    def test_max_length(self):
        with pytest.raises(ValidationError) as exc_info:
            LengthValidator("code", {"max_length": 3}).validate("ABCD", {})

        assert exc_info.value.message == "Field code should have at most 3 characters."

    def test_exact_length(self):
        with pytest.raises(ValidationError) as exc_info:
            LengthValidator("zip", {"length": 5}).validate("123", {})

        assert exc_info.value.message == "Field zip should be only 5 characters."

    def test_values_without_length_fail(self):
        with pytest.raises(ValidationError):
            LengthValidator("zip", {"length": 5}).validate(12345, {})

    @pytest.mark.parametrize("parameters", [{}, {"min_length": 1, "max_length": 4}])
    def test_exactly_one_bound_required(self, parameters):
        with pytest.raises(ValueError, match="exactly one of"):
            LengthValidator("zip", parameters)


class TestPatternValidator:
    """Tests for PatternValidator"""

    def test_phone_accepts_numbers_and_strings(self):
        validator = PatternValidator("phone", {"pattern": "phone"})
        validator.validate(1234567890, {})
        validator.validate("1234567890", {})

    def test_phone_rejects_short_number(self):
        with pytest.raises(ValidationError) as exc_info:
            PatternValidator("phone", {"pattern": "phone"}).validate(12345, {})

        assert exc_info.value.message == "Field phone should be a valid 10-digit phone number."
        assert exc_info.value.rule_name == "phone"

    def test_email(self):
        validator = PatternValidator("email", {"pattern": "email"})
        validator.validate("a@b.com", {})

        with pytest.raises(ValidationError) as exc_info:
            validator.validate("not-an-email", {})

        assert exc_info.value.message == "Field email should be a valid email address."

    def test_date_uses_configured_format(self):
        validator = PatternValidator("dob", {"pattern": "date", "date_format": "yyyy-mm-dd"})
        validator.validate("1990-05-17", {})

        with pytest.raises(ValidationError) as exc_info:
            validator.validate("17/05/1990", {})

        assert exc_info.value.message == "Field dob should be a valid date in the format yyyy-mm-dd."
        assert exc_info.value.rule_name == "date_format"

    def test_date_defaults_to_day_first(self):
        validator = PatternValidator("dob", {"pattern": "date"})
        assert validator.date_format == "dd/mm/yyyy"
        assert validator.uses_fallback_format is False

        with pytest.raises(ValidationError) as exc_info:
            validator.validate("1990-05-17", {})

        assert exc_info.value.message == "Field dob should be a valid date in the format dd/mm/yyyy."

    def test_unsupported_date_format_falls_back(self):
        validator = PatternValidator("dob", {"pattern": "date", "date_format": "dd.mm.yyyy"})
        assert validator.uses_fallback_format is True
        validator.validate("17/05/1990", {})

    def test_unknown_pattern_raises_value_error(self):
        with pytest.raises(ValueError, match="pattern"):
            PatternValidator("x", {"pattern": "ipv4"})

    @given(st.from_regex(r"^[0-9]{10}$", fullmatch=True))
    def test_property_ten_digit_strings_pass(self, value):
        """Property test: any 10 ASCII digit string is a phone number"""
        PatternValidator("phone", {"pattern": "phone"}).validate(value, {})


class TestAllowedValuesValidator:
    """Tests for AllowedValuesValidator"""

    def test_allowed_value_passes(self):
        AllowedValuesValidator("plan", {"valid_values": ["basic", "premium"]}).validate("basic", {})

    def test_other_value_fails(self):
        validator = AllowedValuesValidator("plan", {"valid_values": ["basic", "premium"]})

        with pytest.raises(ValidationError) as exc_info:
            validator.validate("gold", {})

        assert exc_info.value.message == "Field plan should be one of the valid values: basic, premium."

    def test_empty_list_rejects_everything(self):
        with pytest.raises(ValidationError):
            AllowedValuesValidator("plan", {"valid_values": []}).validate("basic", {})

    def test_bool_does_not_match_number(self):
        with pytest.raises(ValidationError):
            AllowedValuesValidator("flag", {"valid_values": [1, 0]}).validate(True, {})

    def test_requires_valid_values(self):
        with pytest.raises(ValueError, match="valid_values"):
            AllowedValuesValidator("plan")


class TestFormatValue:
    """Tests for rendering rule parameters in messages"""

    @pytest.mark.parametrize("value,expected", [(65, "65"), (65.0, "65"), (0.5, "0.5"), (True, "true"), ("x", "x")])
    def test_format_value(self, value, expected):
        assert format_value(value) == expected
