"""User domain object."""

from __future__ import annotations

from typing import Optional

from .base import DomainModel


class User(DomainModel):
    """A person with access to one or more properties.

    Attributes:
        id: Server identifier (GraphQL ``ID``, always a string on the wire)
        first_name: Given name
        last_name: Family name
        email: Contact email address
        title: Job title, if known
        company: Employer, if known
        phone: Contact phone number, if known
        skype: Skype handle, if known
    """

    id: str
    first_name: str
    last_name: str
    email: str
    title: Optional[str] = None
    company: Optional[str] = None
    phone: Optional[str] = None
    skype: Optional[str] = None


class UserPayload(DomainModel):
    """Payload of ``userById`` and ``logIn``."""

    user: User
