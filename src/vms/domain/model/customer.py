"""Customer entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from vms.domain.exceptions import ValidationError

MAX_NAME_LENGTH = 64


def _now() -> datetime:
    # Stored timestamps keep millisecond precision.
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def _clean_name(name: str) -> str:
    if not name or not name.strip():
        raise ValidationError("Customer name is required")
    name = name.strip()
    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(f"Customer name must be at most {MAX_NAME_LENGTH} characters")
    return name


@dataclass
class Customer:
    """A customer record.

    ``id`` and ``created_at`` never change after creation; ``name`` is
    mutated only through ``update()``.  The plain ``__init__`` lets the
    repository reconstitute rows without re-validating.
    """

    id: UUID
    name: str
    created_at: datetime = field(default_factory=_now)

    @staticmethod
    def create(name: str) -> Customer:
        return Customer(id=uuid4(), name=_clean_name(name))

    def update(self, name: str) -> None:
        self.name = _clean_name(name)
