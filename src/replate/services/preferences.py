"""Dietary preference profile service."""

from dataclasses import dataclass
from typing import Protocol

from replate.domain.errors import ValidationError
from replate.domain.preferences import (
    ALLERGY_OPTIONS,
    DIET_OPTIONS,
    AllergyOption,
    DietaryPreferences,
    DietOption,
)


class PreferencesRepository(Protocol):
    """Persistence interface for dietary preferences."""

    def get_preferences(self, user_id: str) -> DietaryPreferences | None:
        """Return saved preferences for a user, if any."""

    def save_preferences(self, user_id: str, preferences: DietaryPreferences) -> None:
        """Insert or replace a user's preferences."""


@dataclass
class PreferencesService:
    """Service for saving and resolving dietary preferences."""

    repository: PreferencesRepository

    def save(
        self, user_id: str | None, payload: dict[str, object] | None
    ) -> DietaryPreferences:
        """Persist preferences from a request payload and return them."""
        if not user_id:
            raise ValidationError("User ID is required")
        preferences = DietaryPreferences.from_payload(payload)
        self.repository.save_preferences(user_id, preferences)
        return preferences

    def get(self, user_id: str) -> DietaryPreferences:
        """Return saved preferences or the defaults."""
        return self.repository.get_preferences(user_id) or DietaryPreferences()

    def resolve(
        self, user_id: str, inline: dict[str, object] | None
    ) -> tuple[DietaryPreferences, bool]:
        """Return preferences for a request and whether the saved profile was used."""
        if inline is not None:
            return DietaryPreferences.from_payload(inline), False
        return self.get(user_id), True

    @staticmethod
    def options() -> tuple[tuple[DietOption, ...], tuple[AllergyOption, ...]]:
        """Return the static diet and allergy catalogs."""
        return DIET_OPTIONS, ALLERGY_OPTIONS
