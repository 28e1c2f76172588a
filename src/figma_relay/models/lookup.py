"""Explicit result variants for remote lookups.

Resolver functions return ``Found`` or ``Absent`` instead of raising, so
callers branch with ``isinstance`` the same way for every failure cause.
"""

from pydantic import BaseModel


class Found(BaseModel):
    """Lookup succeeded."""

    value: str


class Absent(BaseModel):
    """Lookup yielded nothing: not found, missing data, or the remote call failed."""

    reason: str


LookupResult = Found | Absent
