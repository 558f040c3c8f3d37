"""Favourite join between a user and a recipe."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping


@dataclass
class Favourite:
    """
    A favourite is stored twice for independent queries:
    `users/{user_id}/favorites/{recipe_id}` and
    `recipes/{recipe_id}/favorites/{user_id}`.
    """

    user_id: str
    recipe_id: str
    timestamp: int = 0

    def recipe_document(self) -> Dict[str, Any]:
        """Document written under the recipe."""
        return {"timestamp": self.timestamp}

    def user_document(self, recipe_fields: Mapping[str, Any]) -> Dict[str, Any]:
        """Document written under the user: a copy of the recipe plus the timestamp."""
        fields = {key: value for key, value in recipe_fields.items() if key != "id"}
        fields["timestamp"] = self.timestamp
        return fields
