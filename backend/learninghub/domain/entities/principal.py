"""Authenticated administrator identity, passed explicitly to every mutation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AdminPrincipal:
    """The administrator on whose behalf a write is performed."""

    admin_id: str
