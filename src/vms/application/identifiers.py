"""Parsing of user-typed identifiers."""

from __future__ import annotations

from uuid import UUID

from vms.domain.exceptions import ValidationError


def parse_id(raw: str, kind: str) -> UUID:
    """Turn console/CLI text into a UUID, or raise ValidationError."""
    try:
        return UUID(raw.strip())
    except (AttributeError, ValueError) as exc:
        raise ValidationError(f"Invalid {kind} ID: {raw!r}") from exc
