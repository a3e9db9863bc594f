"""Contact form field validation."""

from __future__ import annotations

import re

from folio.models.contact import ContactMessage

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

NAME_MIN_LENGTH = 2
SUBJECT_MIN_LENGTH = 5
MESSAGE_MIN_LENGTH = 10
MESSAGE_MAX_LENGTH = 1000

CONTACT_FIELDS: tuple[str, ...] = ("name", "email", "subject", "message")


def validate_field(field: str, value: str) -> str | None:
    """Return the error message for one field, or ``None`` when it is valid."""
    text = value.strip()
    match field:
        case "name":
            if not text:
                return "Le nom est requis"
            if len(text) < NAME_MIN_LENGTH:
                return f"Le nom doit contenir au moins {NAME_MIN_LENGTH} caractères"
        case "email":
            if not text:
                return "L'email est requis"
            if not EMAIL_PATTERN.match(text):
                return "Format d'email invalide"
        case "subject":
            if not text:
                return "Le sujet est requis"
            if len(text) < SUBJECT_MIN_LENGTH:
                return f"Le sujet doit contenir au moins {SUBJECT_MIN_LENGTH} caractères"
        case "message":
            if not text:
                return "Le message est requis"
            if len(text) < MESSAGE_MIN_LENGTH:
                return f"Le message doit contenir au moins {MESSAGE_MIN_LENGTH} caractères"
            if len(text) > MESSAGE_MAX_LENGTH:
                return f"Le message ne peut pas dépasser {MESSAGE_MAX_LENGTH} caractères"
        case _:
            raise ValueError(f"Unknown contact field: {field}")
    return None


def validate_contact_form(message: ContactMessage) -> dict[str, str]:
    """Map every invalid field to its error message. Empty when the form is valid."""
    errors: dict[str, str] = {}
    for field in CONTACT_FIELDS:
        error = validate_field(field, getattr(message, field))
        if error is not None:
            errors[field] = error
    return errors
