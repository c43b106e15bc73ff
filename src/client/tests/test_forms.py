"""Tests for signup form validation."""

import unittest

from client.forms import SIGNUP_FIELDS, SignUpForm, empty_values, validate_signup


VALID = {
    "firstName": "Ada",
    "lastName": "Lovelace",
    "email": "ada@example.com",
    "password": "Secret123",
    "confirmPassword": "Secret123",
}


class TestValidateSignup(unittest.TestCase):

    def test_valid_values_parse(self):
        form, errors = validate_signup(VALID)

        self.assertEqual(errors, {})
        self.assertIsInstance(form, SignUpForm)
        self.assertEqual(form.first_name, "Ada")

    def test_payload_uses_wire_names(self):
        form, _ = validate_signup({**VALID, "firstName": "  Ada  "})

        self.assertEqual(form.to_payload(), VALID)

    def test_empty_form_reports_every_field(self):
        form, errors = validate_signup(empty_values())

        self.assertIsNone(form)
        self.assertEqual(set(errors), set(SIGNUP_FIELDS))
        self.assertEqual(errors["firstName"], "First name is required")
        self.assertEqual(errors["lastName"], "Last name is required")

    def test_bad_email_message(self):
        _, errors = validate_signup({**VALID, "email": "not-an-email"})

        self.assertEqual(errors, {"email": "Please enter a valid email address"})

    def test_weak_password_message(self):
        _, errors = validate_signup({**VALID, "password": "short", "confirmPassword": "short"})

        self.assertEqual(errors["password"], "Password must be at least 8 characters")

    def test_mismatched_confirmation(self):
        _, errors = validate_signup({**VALID, "confirmPassword": "Secret124"})

        self.assertEqual(errors, {"confirmPassword": "Passwords must match"})

    def test_missing_confirmation(self):
        _, errors = validate_signup({**VALID, "confirmPassword": ""})

        self.assertEqual(errors, {"confirmPassword": "Please confirm your password"})

    def test_password_is_not_stripped(self):
        form, errors = validate_signup({**VALID, "password": " Secret123 ", "confirmPassword": " Secret123 "})

        self.assertEqual(errors, {})
        self.assertEqual(form.password, " Secret123 ")


if __name__ == '__main__':
    unittest.main()
