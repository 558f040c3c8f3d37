"""Recipe record and its moderation status."""

import enum
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from recipes.exceptions import InvalidTransition


class ModerationStatus(str, enum.Enum):
    """Two-state moderation gate; only approved recipes are readable."""

    PENDING = "pending"
    APPROVED = "approved"

    @classmethod
    def parse(cls, value) -> "ModerationStatus":
        """Map a stored value to a status; anything unknown stays pending."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.PENDING

    def approve(self) -> "ModerationStatus":
        """The only transition: pending -> approved."""
        if self is not ModerationStatus.PENDING:
            raise InvalidTransition()
        return ModerationStatus.APPROVED


@dataclass
class Recipe:
    """Community-submitted recipe as stored in the `recipes` collections."""

    title: str
    ingredients: str
    instructions: str = ""
    author_id: str = ""
    timestamp: int = 0
    status: ModerationStatus = ModerationStatus.PENDING
    moderator_comment: str = ""
    id: Optional[str] = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Recipe":
        """Build a Recipe from a normalized record (fields plus `id`)."""
        return cls(
            id=record.get("id"),
            title=str(record.get("title") or ""),
            ingredients=str(record.get("ingredients") or ""),
            instructions=str(record.get("instructions") or ""),
            author_id=str(record.get("authorId") or ""),
            timestamp=int(record.get("timestamp") or 0),
            status=ModerationStatus.parse(record.get("status")),
            moderator_comment=str(record.get("moderatorComment") or ""),
        )

    @property
    def is_visible(self) -> bool:
        return self.status is ModerationStatus.APPROVED

    def to_document(self) -> Dict[str, Any]:
        """Field mapping written to Firestore (no id; the store assigns it)."""
        return {
            "title": self.title,
            "ingredients": self.ingredients,
            "instructions": self.instructions,
            "timestamp": self.timestamp,
            "authorId": self.author_id,
            "status": self.status.value,
            "moderatorComment": self.moderator_comment,
        }

    def as_record(self) -> Dict[str, Any]:
        """Normalized record as held by view state."""
        return {**self.to_document(), "id": self.id}


def is_approved(record: Mapping[str, Any]) -> bool:
    """Return True when a normalized record passes the moderation gate."""
    return ModerationStatus.parse(record.get("status")) is ModerationStatus.APPROVED
