"""Argument guards shared by every identifier-taking operation."""

from __future__ import annotations

from typing import TypeVar

from github_rest.domain.exceptions import ArgumentNullError, EmptyArgumentError

T = TypeVar("T")


def ensure_not_none(value: T | None, name: str) -> T:
    if value is None:
        raise ArgumentNullError(name)
    return value


def ensure_not_empty(value: str | None, name: str) -> str:
    """Reject ``None`` and empty or whitespace-only strings."""
    value = ensure_not_none(value, name)
    if not value.strip():
        raise EmptyArgumentError(name)
    return value
