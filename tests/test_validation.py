"""Tests for the shared validation rules."""

from datetime import date, timedelta

import pytest

from account_portal.api.schemas import LoginRequest, PasswordChangeRequest, ProfileUpdateRequest
from account_portal.validation import validate_login, validate_password_change, validate_profile


def password_change(current="currentpass", new="newpass123", confirm="newpass123"):
    return PasswordChangeRequest(
        currentPassword=current, newPassword=new, confirmPassword=confirm
    )


class TestPasswordChangeRules:
    """Test the ordered, short-circuiting password rules."""

    def test_valid_input(self):
        """Test that a well-formed change has no errors."""
        assert validate_password_change(password_change()) == {}

    @pytest.mark.parametrize(
        "kwargs, field",
        [
            ({"current": ""}, "currentPassword"),
            ({"new": ""}, "newPassword"),
            ({"confirm": ""}, "confirmPassword"),
            ({"current": "", "new": "", "confirm": ""}, "currentPassword"),
            ({"new": "", "confirm": ""}, "newPassword"),
        ],
    )
    def test_first_missing_field_is_reported(self, kwargs, field):
        """Test that only the first missing field gets the required message."""
        errors = validate_password_change(password_change(**kwargs))
        assert errors == {field: "All fields are required"}

    def test_none_counts_as_missing(self):
        """Test that null fields are treated like empty ones."""
        errors = validate_password_change(PasswordChangeRequest(currentPassword="currentpass"))
        assert errors == {"newPassword": "All fields are required"}

    def test_mismatch_checked_before_length(self):
        """Test that a short mismatched pair reports the mismatch."""
        errors = validate_password_change(password_change(new="123", confirm="456"))
        assert errors == {"confirmPassword": "New passwords do not match"}

    @pytest.mark.parametrize("length", [1, 2, 3, 4, 5])
    def test_short_new_password(self, length):
        """Test the minimum length rule."""
        short = "x" * length
        errors = validate_password_change(password_change(new=short, confirm=short))
        assert errors == {"newPassword": "Password must be at least 6 characters"}

    def test_exact_minimum_length_is_valid(self):
        """Test that six characters pass."""
        assert validate_password_change(password_change(new="abcdef", confirm="abcdef")) == {}

    def test_current_password_not_checked(self):
        """Test that the mock credential is left to the server."""
        assert validate_password_change(password_change(current="wrongpass")) == {}


class TestLoginRules:
    """Test login rules, which are all evaluated."""

    def test_valid_input(self):
        """Test valid credentials."""
        assert validate_login(LoginRequest(email="test@example.com", password="password123")) == {}

    def test_empty_email(self):
        """Test the required email rule."""
        errors = validate_login(LoginRequest(email="", password="password123"))
        assert errors == {"email": "Email is required."}

    def test_blank_email(self):
        """Test that whitespace does not count as an email."""
        errors = validate_login(LoginRequest(email="   ", password="password123"))
        assert errors == {"email": "Email is required."}

    def test_short_password(self):
        """Test the password length rule."""
        errors = validate_login(LoginRequest(email="test@example.com", password="12345"))
        assert errors == {"password": "Password must be at least 6 characters."}

    def test_both_errors_reported(self):
        """Test that both rules are evaluated together."""
        errors = validate_login(LoginRequest(email="", password="123"))
        assert set(errors) == {"email", "password"}


class TestProfileRules:
    """Test profile rules, which are all evaluated."""

    def test_valid_profile(self, valid_profile):
        """Test a fully valid profile."""
        assert validate_profile(ProfileUpdateRequest.model_validate(valid_profile)) == {}

    def test_empty_submission_reports_all_required_fields(self):
        """Test that an empty profile reports every required field at once."""
        errors = validate_profile(ProfileUpdateRequest())

        assert errors == {
            "username": "Username must be at least 6 characters",
            "fullName": "Full name is required",
            "email": "Must be a valid email format",
            "phone": "Phone must be 10-15 digits",
        }

    def test_optional_fields_may_be_empty(self, valid_profile):
        """Test that birth date and bio are optional."""
        valid_profile.update(birthDate="", bio="")
        assert validate_profile(ProfileUpdateRequest.model_validate(valid_profile)) == {}

    @pytest.mark.parametrize("username", ["a", "abcde"])
    def test_short_username(self, valid_profile, username):
        """Test the username length rule."""
        valid_profile["username"] = username
        errors = validate_profile(ProfileUpdateRequest.model_validate(valid_profile))
        assert errors == {"username": "Username must be at least 6 characters"}

    def test_blank_full_name(self, valid_profile):
        """Test that a whitespace-only full name is rejected."""
        valid_profile["fullName"] = "  "
        errors = validate_profile(ProfileUpdateRequest.model_validate(valid_profile))
        assert errors == {"fullName": "Full name is required"}

    @pytest.mark.parametrize(
        "email",
        ["john", "john@", "john@example", "@example.com", "john doe@example.com", "john@example.com\n"],
    )
    def test_invalid_email(self, valid_profile, email):
        """Test the email shape rule."""
        valid_profile["email"] = email
        errors = validate_profile(ProfileUpdateRequest.model_validate(valid_profile))
        assert errors == {"email": "Must be a valid email format"}

    @pytest.mark.parametrize("phone", ["123456789", "1234567890123456", "123-456-7890", "+1234567890"])
    def test_invalid_phone(self, valid_profile, phone):
        """Test the phone digit rule."""
        valid_profile["phone"] = phone
        errors = validate_profile(ProfileUpdateRequest.model_validate(valid_profile))
        assert errors == {"phone": "Phone must be 10-15 digits"}

    @pytest.mark.parametrize("phone", ["1234567890", "123456789012345"])
    def test_phone_bounds(self, valid_profile, phone):
        """Test that 10 and 15 digits are both accepted."""
        valid_profile["phone"] = phone
        assert validate_profile(ProfileUpdateRequest.model_validate(valid_profile)) == {}

    def test_future_birth_date(self, valid_profile):
        """Test that a birth date a year ahead is rejected."""
        valid_profile["birthDate"] = (date.today() + timedelta(days=366)).isoformat()
        errors = validate_profile(ProfileUpdateRequest.model_validate(valid_profile))
        assert errors == {"birthDate": "Birth date cannot be in the future"}

    def test_birth_date_relative_to_reference_day(self, valid_profile):
        """Test that the reference day itself is allowed and the day before is not."""
        valid_profile["birthDate"] = "2024-03-01"
        data = ProfileUpdateRequest.model_validate(valid_profile)
        assert validate_profile(data, today=date(2024, 3, 1)) == {}
        assert validate_profile(data, today=date(2024, 2, 29)) == {
            "birthDate": "Birth date cannot be in the future"
        }

    def test_unparseable_birth_date(self, valid_profile):
        """Test that a non-date birth date is reported."""
        valid_profile["birthDate"] = "not-a-date"
        errors = validate_profile(ProfileUpdateRequest.model_validate(valid_profile))
        assert errors == {"birthDate": "Birth date must be a valid date"}

    @pytest.mark.parametrize("birth_date", ["19900101", "1990-W01-1", "1990-1-1", "1990-02-30", "1990-01-01\n"])
    def test_birth_date_must_be_year_month_day(self, valid_profile, birth_date):
        """Test that only real YYYY-MM-DD dates are accepted."""
        valid_profile["birthDate"] = birth_date
        errors = validate_profile(ProfileUpdateRequest.model_validate(valid_profile))
        assert errors == {"birthDate": "Birth date must be a valid date"}

    def test_bio_limit(self, valid_profile):
        """Test that 160 characters pass and 161 do not."""
        valid_profile["bio"] = "a" * 160
        assert validate_profile(ProfileUpdateRequest.model_validate(valid_profile)) == {}

        valid_profile["bio"] = "a" * 161
        errors = validate_profile(ProfileUpdateRequest.model_validate(valid_profile))
        assert errors == {"bio": "Bio must be 160 characters or less"}
