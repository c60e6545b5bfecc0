"""Recipe suggestions assembled from pantry, catalog and preferences."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Protocol

from replate.domain.preferences import DietaryPreferences
from replate.domain.recipes import Recipe, RecipeMatch
from replate.services.coverage import match_recipes, pantry_quantities
from replate.services.dietary import filter_matches
from replate.services.generation import PantryContext, RecipeGenerator
from replate.services.pantry import PantryService
from replate.services.preferences import PreferencesService
from replate.services.ranking import DEFAULT_TOP_N, RankingCriteria, rank_matches

_logger = logging.getLogger(__name__)


class RecipeCatalog(Protocol):
    """Read interface for the local recipe catalog."""

    def list_recipes(self) -> list[Recipe]:
        """Return every catalog recipe in a stable order."""


@dataclass(frozen=True)
class DietarySummary:
    """Which dietary filters were applied and how many recipes they removed."""

    diet: str
    allergies: list[str]
    restrictions: list[str]
    filtered_count: int
    using_saved_preferences: bool


@dataclass(frozen=True)
class SuggestionResult:
    """Ranked recipes returned for a suggestion request."""

    recipes: list[RecipeMatch]
    message: str
    pantry_count: int
    dietary_summary: DietarySummary
    source: str


@dataclass(frozen=True)
class SuggestionRequest:
    """Inputs for a suggestion request beyond the user id."""

    preferences: dict[str, object] | None = None
    max_minutes: int | None = None
    protein_target: float | None = None
    disliked_ingredients: tuple[str, ...] = ()


@dataclass
class SuggestionService:
    """Builds recipe suggestions for a user's pantry."""

    pantry_service: PantryService
    preferences_service: PreferencesService
    catalog: RecipeCatalog
    generator: RecipeGenerator | None = None
    generation_timeout_seconds: float = 8.0
    limit: int = DEFAULT_TOP_N

    async def suggest(
        self, user_id: str, request: SuggestionRequest | None = None
    ) -> SuggestionResult:
        """Return filtered, ranked recipes with a dietary summary."""
        resolved = request or SuggestionRequest()
        preferences, using_saved = self.preferences_service.resolve(
            user_id, resolved.preferences
        )
        entries = self.pantry_service.list_pantry(user_id)
        recipes, source = await self._candidate_recipes(
            PantryContext(pantry=entries, preferences=preferences)
        )

        candidates = match_recipes(pantry_quantities(entries), recipes)
        filtered = filter_matches(candidates, preferences)
        criteria = RankingCriteria(
            preferences=preferences,
            max_minutes=resolved.max_minutes,
            protein_target=resolved.protein_target,
            disliked_ingredients=resolved.disliked_ingredients,
        )
        ranked = [item.match for item in rank_matches(filtered, criteria, self.limit)]
        _logger.info(
            "Suggestions: user=%s source=%s candidates=%s filtered=%s returned=%s",
            user_id,
            source,
            len(candidates),
            len(filtered),
            len(ranked),
        )
        return SuggestionResult(
            recipes=ranked,
            message=(
                f"Found {len(ranked)} recipes matching your dietary preferences!"
            ),
            pantry_count=len(entries),
            dietary_summary=_summarize(
                preferences,
                filtered_count=len(candidates) - len(filtered),
                using_saved=using_saved,
            ),
            source=source,
        )

    async def _candidate_recipes(
        self, context: PantryContext
    ) -> tuple[list[Recipe], str]:
        """Return generated recipes, or the catalog when generation fails."""
        if self.generator is not None:
            try:
                generated = await asyncio.wait_for(
                    self.generator.generate_recipes(context),
                    timeout=self.generation_timeout_seconds,
                )
            except TimeoutError:
                _logger.warning(
                    "Recipe generation timed out after %ss; using catalog",
                    self.generation_timeout_seconds,
                )
            except Exception:
                _logger.warning(
                    "Recipe generation failed; using catalog", exc_info=True
                )
            else:
                if generated:
                    return generated, "generated"
                _logger.warning("Recipe generation returned nothing; using catalog")
        return self.catalog.list_recipes(), "catalog"


def _summarize(
    preferences: DietaryPreferences, *, filtered_count: int, using_saved: bool
) -> DietarySummary:
    return DietarySummary(
        diet=preferences.diet,
        allergies=list(preferences.allergies),
        restrictions=list(preferences.restricted_ingredients),
        filtered_count=filtered_count,
        using_saved_preferences=using_saved,
    )
