"""
Unit tests for the built-in and cross-field validation rules.
"""

from datetime import date, datetime
from decimal import Decimal

import pytest

from formguard import CrossValidators, ValidationError, Validators


def error_for(rule, value, field_name="field"):
    return rule(field_name, value)


class TestPresenceValidators:
    """not_null, not_empty and not_blank"""

    def test_not_null(self):
        assert error_for(Validators.not_null(), "x") is None
        assert error_for(Validators.not_null(), "") is None

        error = error_for(Validators.not_null(), None, "name")
        assert error == ValidationError("name", "must not be null", "notNull")

    @pytest.mark.parametrize("value", [None, ""])
    def test_not_empty_rejects(self, value):
        error = error_for(Validators.not_empty(), value)
        assert error.code == "notEmpty"
        assert error.message == "must not be empty"

    def test_not_empty_accepts_whitespace(self):
        assert error_for(Validators.not_empty(), "   ") is None

    @pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
    def test_not_blank_rejects(self, value):
        error = error_for(Validators.not_blank(), value)
        assert error.code == "notBlank"
        assert error.message == "must not be blank"

    def test_not_blank_accepts_text(self):
        assert error_for(Validators.not_blank(), " a ") is None


class TestFormatValidators:
    """Email, URL, UUID, IP address and phone number formats"""

    @pytest.mark.parametrize("value", [
        "user@example.com",
        "test.user@domain.co.uk",
        "user+tag@example.org",
        "first_last@sub-domain.example.io",
    ])
    def test_is_email_accepts(self, value):
        assert error_for(Validators.is_email(), value) is None

    @pytest.mark.parametrize("value", [
        "user@",
        "@example.com",
        ".user@example.com",
        "user.@example.com",
        "user..name@example.com",
        "user@-example.com",
        "user@example-.com",
        "user@example.c",
        "user@localhost",
        "user name@example.com",
    ])
    def test_is_email_rejects(self, value):
        error = error_for(Validators.is_email(), value, "email")
        assert error == ValidationError("email", "must be a valid email", "isEmail", value)

    @pytest.mark.parametrize("value", [
        "https://example.com",
        "http://localhost:8080/path?q=1#top",
        "ftp://files.example.com/pub/file.txt",
        "file:///tmp/report.txt",
        "HTTPS://EXAMPLE.COM",
        "https://example.com/search?q=a%20b&lang=en",
        "http://[::1]:8080/status",
    ])
    def test_is_url_accepts(self, value):
        assert error_for(Validators.is_url(), value) is None

    @pytest.mark.parametrize("value", [
        "not-a-url",
        "example.com",
        "htp://wrong.com",
        "http://",
        "http://exa mple.com",
        "http://example.com:99999",
        "http://example.com/<script>",
        "http://example.com/%zz",
        "http://example.com/a|b",
        "http://example.com/\"x\"",
        "http://example.com/100%",
        "",
    ])
    def test_is_url_rejects(self, value):
        error = error_for(Validators.is_url(), value)
        assert error.code == "isUrl"
        assert error.message == "must be a valid URL"

    def test_is_uuid(self):
        rule = Validators.is_uuid()
        assert error_for(rule, "550e8400-e29b-41d4-a716-446655440000") is None
        assert error_for(rule, "550E8400-E29B-41D4-A716-446655440000") is None

        for value in ("not-a-uuid", "550e8400e29b41d4a716446655440000",
                      "550e8400-e29b-41d4-a716-44665544000g"):
            assert error_for(rule, value).code == "isUuid"

    @pytest.mark.parametrize("value", [
        "192.168.1.1",
        "0.0.0.0",
        "255.255.255.255",
        "::1",
        "2001:db8::1",
        "fe80::1ff:fe23:4567:890a",
    ])
    def test_is_ip_address_accepts(self, value):
        assert error_for(Validators.is_ip_address(), value) is None

    @pytest.mark.parametrize("value", [
        "256.1.1.1",
        "192.168.1",
        "1.2.3.4.5",
        "not-an-ip",
        "example.com",
    ])
    def test_is_ip_address_rejects(self, value):
        error = error_for(Validators.is_ip_address(), value)
        assert error.message == "must be a valid IP address"
        assert error.code == "isIpAddress"

    @pytest.mark.parametrize("value", [
        "+1 (555) 123-4567",
        "555-123-4567",
        "+44 20 7946 0958",
        "5551234567",
    ])
    def test_is_phone_number_accepts(self, value):
        assert error_for(Validators.is_phone_number(), value) is None

    @pytest.mark.parametrize("value", ["abc", "123-", "phone: 555", ""])
    def test_is_phone_number_rejects(self, value):
        error = error_for(Validators.is_phone_number(), value)
        assert error.message == "must be a valid phone number"
        assert error.code == "isPhoneNumber"


class TestLengthValidators:
    """min_length, max_length and length"""

    def test_min_length(self):
        rule = Validators.min_length(3)
        assert error_for(rule, "abc") is None

        error = error_for(rule, "ab", "username")
        assert error == ValidationError(
            "username", "must be at least 3 characters", "minLength", "ab"
        )

    def test_max_length(self):
        rule = Validators.max_length(5)
        assert error_for(rule, "hello") is None

        error = error_for(rule, "hello!")
        assert error.message == "must be at most 5 characters"
        assert error.code == "maxLength"

    def test_length_bounds_are_inclusive(self):
        rule = Validators.length(2, 4)
        assert error_for(rule, "ab") is None
        assert error_for(rule, "abcd") is None

        for value in ("a", "abcde"):
            error = error_for(rule, value)
            assert error.message == "must be between 2 and 4 characters"
            assert error.code == "length"


class TestNumericValidators:
    """min, max and range compare as floats"""

    def test_min(self):
        rule = Validators.min(18)
        assert error_for(rule, 18) is None
        assert error_for(rule, 18.5) is None

        error = error_for(rule, 17.9, "age")
        assert error == ValidationError("age", "must be at least 18", "min", 17.9)

    def test_max(self):
        rule = Validators.max(100)
        assert error_for(rule, 100) is None

        error = error_for(rule, Decimal("100.01"))
        assert error.message == "must be at most 100"
        assert error.code == "max"

    @pytest.mark.parametrize("value", [18, 50, 120, 18.0])
    def test_range_accepts(self, value):
        assert error_for(Validators.range(18, 120), value) is None

    @pytest.mark.parametrize("value", [17, 121, -1])
    def test_range_rejects(self, value):
        error = error_for(Validators.range(18, 120), value)
        assert error.message == "must be between 18 and 120"
        assert error.code == "range"
        assert error.rejected_value == value


class TestPatternValidators:
    """pattern and character-class validators"""

    def test_pattern_requires_full_match(self):
        rule = Validators.pattern(r"[A-Z]{3}")
        assert error_for(rule, "ABC") is None

        error = error_for(rule, "ABCD", "code")
        assert error == ValidationError("code", "must match pattern: [A-Z]{3}", "pattern")
        assert error.rejected_value is None

    @pytest.mark.parametrize("rule_factory,valid,invalid,code,message", [
        (Validators.is_alpha, "Hello", "Hello1",
         "isAlpha", "must contain only alphabetic characters"),
        (Validators.is_alphanumeric, "Hello123", "Hello 123",
         "isAlphanumeric", "must contain only alphanumeric characters"),
        (Validators.is_numeric, "12345", "-12",
         "isNumeric", "must contain only numeric characters"),
    ])
    def test_character_classes(self, rule_factory, valid, invalid, code, message):
        rule = rule_factory()
        assert error_for(rule, valid) is None

        error = error_for(rule, invalid)
        assert error.code == code
        assert error.message == message

    @pytest.mark.parametrize("rule_factory", [
        Validators.is_alpha,
        Validators.is_alphanumeric,
        Validators.is_numeric,
    ])
    def test_character_classes_reject_empty_string(self, rule_factory):
        assert error_for(rule_factory(), "") is not None

    def test_character_classes_are_ascii_only(self):
        assert error_for(Validators.is_alpha(), "café") is not None
        assert error_for(Validators.is_numeric(), "١٢٣") is not None


class TestDateValidators:
    """is_date, is_before and is_after"""

    def test_is_date(self):
        rule = Validators.is_date("%Y-%m-%d")
        assert error_for(rule, "2024-02-29") is None

        for value in ("2024-02-30", "29/02/2024", "yesterday"):
            error = error_for(rule, value)
            assert error.message == "must be a valid date in format: %Y-%m-%d"
            assert error.code == "isDate"

    def test_is_before_is_strict(self):
        rule = Validators.is_before(date(2024, 1, 1))
        assert error_for(rule, date(2023, 12, 31)) is None

        error = error_for(rule, date(2024, 1, 1))
        assert error.message == "must be before 2024-01-01"
        assert error.code == "isBefore"

    def test_is_after_is_strict(self):
        reference = datetime(2024, 1, 1, 12, 0)
        rule = Validators.is_after(reference)
        assert error_for(rule, datetime(2024, 1, 1, 12, 1)) is None

        error = error_for(rule, reference)
        assert error.message == "must be after 2024-01-01 12:00:00"
        assert error.code == "isAfter"


class TestMembershipValidators:
    """is_in and is_not_in"""

    def test_is_in(self):
        rule = Validators.is_in(["red", "green", "blue"])
        assert error_for(rule, "green") is None

        error = error_for(rule, "purple", "color")
        assert error == ValidationError(
            "color", "must be one of: [red, green, blue]", "isIn", "purple"
        )

    def test_is_not_in(self):
        rule = Validators.is_not_in(["admin", "root"])
        assert error_for(rule, "alice") is None

        error = error_for(rule, "root")
        assert error.message == "must not be one of: [admin, root]"
        assert error.code == "isNotIn"

    def test_is_in_snapshots_allowed_values(self):
        allowed = ["a"]
        rule = Validators.is_in(allowed)
        allowed.append("b")
        assert error_for(rule, "b") is not None


class TestNoneHandling:
    """Every non-presence validator passes None"""

    @pytest.mark.parametrize("rule", [
        Validators.is_email(),
        Validators.is_url(),
        Validators.is_uuid(),
        Validators.is_ip_address(),
        Validators.is_phone_number(),
        Validators.min_length(3),
        Validators.max_length(3),
        Validators.length(1, 3),
        Validators.min(1),
        Validators.max(1),
        Validators.range(1, 2),
        Validators.pattern(r"\d+"),
        Validators.is_alpha(),
        Validators.is_alphanumeric(),
        Validators.is_numeric(),
        Validators.is_date("%Y-%m-%d"),
        Validators.is_before(date(2024, 1, 1)),
        Validators.is_after(date(2024, 1, 1)),
        Validators.is_in(["a"]),
        Validators.is_not_in(["a"]),
    ])
    def test_none_passes(self, rule):
        assert rule("field", None) is None


class TestCrossValidators:
    """date_order"""

    def test_date_order_passes_when_start_is_before_end(self):
        assert CrossValidators.date_order(
            "start_date", date(2024, 1, 1), "end_date", date(2024, 1, 2)
        ) is None

    @pytest.mark.parametrize("start,end", [
        (date(2024, 1, 2), date(2024, 1, 1)),
        (date(2024, 1, 1), date(2024, 1, 1)),
    ])
    def test_date_order_fails_when_start_is_not_before_end(self, start, end):
        error = CrossValidators.date_order("start_date", start, "end_date", end)
        assert error == ValidationError(
            "start_date,end_date", "start_date must be before end_date", "dateOrder"
        )

    @pytest.mark.parametrize("start,end", [
        (None, date(2024, 1, 1)),
        (date(2024, 1, 1), None),
        (None, None),
    ])
    def test_date_order_passes_when_a_date_is_missing(self, start, end):
        assert CrossValidators.date_order("start_date", start, "end_date", end) is None
