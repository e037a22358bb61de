"""Request validation rules, usable without a store or a domain context."""

import re

from protean.exceptions import ValidationError

from pizzeria.shared.errors import SchemaValidationError

MIN_PASSWORD_LENGTH = 6

CONTACT_FIELDS = (
    "name",
    "telephone",
    "street_address",
    "secondary_address",
    "city",
    "state",
    "zip_code",
)
REQUIRED_CONTACT_FIELDS = tuple(f for f in CONTACT_FIELDS if f != "secondary_address")

_FORBIDDEN_EMAIL_CHARS = (";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\")


def check_email(field, email):
    """Ensure an email address follows a basic valid structure."""
    invalid = ValidationError({field: [f"Invalid email address: {email!r}"]})

    if not email or any(c in email for c in (" ", "\t", "\n")):
        raise invalid

    if email.count("@") != 1:
        raise invalid

    local_part, domain_part = email.split("@", 1)

    if not local_part or local_part.startswith(".") or local_part.endswith("."):
        raise invalid

    if not domain_part or domain_part.startswith(".") or domain_part.endswith("."):
        raise invalid

    if "." not in domain_part or ".." in local_part or ".." in domain_part:
        raise invalid

    for label in domain_part.split("."):
        if label.startswith("-") or label.endswith("-"):
            raise invalid

    if any(c in email for c in _FORBIDDEN_EMAIL_CHARS):
        raise invalid


def check_password(field, password):
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError({field: ["Please use at least six characters."]})


def check_phone(field, number):
    """Digits, spaces, hyphens, parentheses and an optional leading +."""
    if not re.search(r"\d", number) or not re.match(r"^\+?[\d\s\-()]+$", number):
        raise ValidationError({field: [f"Invalid phone number: {number!r}"]})


def validate_contact(payload):
    """Check a contact-information payload and return the cleaned fields.

    Required fields must be non-empty strings; ``secondary_address`` may be
    omitted. Unknown keys are rejected. Raises ``SchemaValidationError``
    listing every offending field.
    """
    errors = {}

    for key in payload:
        if key not in CONTACT_FIELDS:
            errors[key] = ["Unknown field"]

    cleaned = {}
    for field in CONTACT_FIELDS:
        value = payload.get(field)
        if value is None:
            if field in REQUIRED_CONTACT_FIELDS:
                errors[field] = ["is required"]
            continue
        if not isinstance(value, str):
            errors[field] = ["must be a string"]
            continue
        value = value.strip()
        if field in REQUIRED_CONTACT_FIELDS and not value:
            errors[field] = ["is required"]
            continue
        cleaned[field] = value

    if "telephone" in cleaned:
        try:
            check_phone("telephone", cleaned["telephone"])
        except ValidationError as exc:
            errors.update(exc.messages)

    if errors:
        raise SchemaValidationError(errors)

    return cleaned
