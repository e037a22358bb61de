import pytest
from pizzeria.shared.errors import SchemaValidationError
from pizzeria.shared.validation import check_email, check_password, check_phone, validate_contact
from protean.exceptions import ValidationError


@pytest.mark.parametrize(
    "email",
    ["jane@example.com", "jane.doe@mail.example.org", "j+pizza@example.co"],
)
def test_valid_emails(email):
    check_email("email", email)


@pytest.mark.parametrize(
    "email",
    [
        "",
        "plainaddress",
        "two@@example.com",
        "a@b@example.com",
        ".jane@example.com",
        "jane.@example.com",
        "jane@example",
        "jane@.example.com",
        "jane@example..com",
        "jane@-example.com",
        "jane doe@example.com",
        "jane<doe>@example.com",
    ],
)
def test_invalid_emails(email):
    with pytest.raises(ValidationError) as exc:
        check_email("email", email)
    assert "email" in exc.value.messages


class TestPassword:
    def test_six_characters_is_enough(self):
        check_password("password", "secret")

    def test_short_password(self):
        with pytest.raises(ValidationError) as exc:
            check_password("password", "abc")
        assert exc.value.messages == {"password": ["Please use at least six characters."]}

    def test_missing_password(self):
        with pytest.raises(ValidationError):
            check_password("password", None)


@pytest.mark.parametrize("number", ["555-1234", "(555) 123-4567", "+44 20 7946 0958"])
def test_valid_phone_numbers(number):
    check_phone("telephone", number)


@pytest.mark.parametrize("number", ["abc-defg", "---", "555.123.4567", "call 555"])
def test_invalid_phone_numbers(number):
    with pytest.raises(ValidationError):
        check_phone("telephone", number)


class TestValidateContact:
    def test_returns_stripped_fields(self, contact):
        contact["name"] = "  Jane Doe  "
        cleaned = validate_contact(contact)
        assert cleaned["name"] == "Jane Doe"
        assert cleaned["zip_code"] == "62701"

    def test_secondary_address_is_optional(self, contact):
        del contact["secondary_address"]
        cleaned = validate_contact(contact)
        assert "secondary_address" not in cleaned

    def test_missing_required_field(self, contact):
        del contact["city"]
        with pytest.raises(SchemaValidationError) as exc:
            validate_contact(contact)
        assert exc.value.messages["city"] == ["is required"]

    def test_blank_required_field(self, contact):
        contact["name"] = "   "
        with pytest.raises(SchemaValidationError) as exc:
            validate_contact(contact)
        assert "name" in exc.value.messages

    def test_unknown_field(self, contact):
        contact["favourite_topping"] = "Anchovies"
        with pytest.raises(SchemaValidationError) as exc:
            validate_contact(contact)
        assert "favourite_topping" in exc.value.messages

    def test_non_string_field(self, contact):
        contact["zip_code"] = 62701
        with pytest.raises(SchemaValidationError) as exc:
            validate_contact(contact)
        assert exc.value.messages["zip_code"] == ["must be a string"]

    def test_bad_phone(self, contact):
        contact["telephone"] = "not a phone"
        with pytest.raises(SchemaValidationError) as exc:
            validate_contact(contact)
        assert "telephone" in exc.value.messages

    def test_reports_every_offending_field(self):
        with pytest.raises(SchemaValidationError) as exc:
            validate_contact({})
        assert set(exc.value.messages) == {"name", "telephone", "street_address", "city", "state", "zip_code"}
