"""Comment left on a recipe."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

ANONYMOUS_LABEL = "Anonymous"


@dataclass
class Comment:
    """User-authored comment stored under `recipes/{id}/comments`."""

    recipe_id: str
    user_id: str
    text: str
    user_email: str = ANONYMOUS_LABEL
    timestamp: int = 0
    id: Optional[str] = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any], recipe_id: str) -> "Comment":
        return cls(
            id=record.get("id"),
            recipe_id=recipe_id,
            user_id=str(record.get("userId") or ""),
            user_email=str(record.get("userEmail") or ANONYMOUS_LABEL),
            text=str(record.get("text") or ""),
            timestamp=int(record.get("timestamp") or 0),
        )

    def to_document(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "userId": self.user_id,
            "userEmail": self.user_email,
            "timestamp": self.timestamp,
        }

    def is_authored_by(self, uid: Optional[str]) -> bool:
        """Return True when uid wrote this comment."""
        return bool(uid) and self.user_id == uid
