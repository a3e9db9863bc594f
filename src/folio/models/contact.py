"""Contact form models."""

from __future__ import annotations

from pydantic import BaseModel


class ContactMessage(BaseModel):
    """A message submitted through the contact form."""

    name: str
    email: str
    subject: str
    message: str
