"""Score-based ranking of pantry recipe matches."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from replate.domain.preferences import DietaryPreferences
from replate.domain.recipes import RecipeMatch
from replate.services.coverage import names_match
from replate.services.dietary import preference_violations

COVERAGE_WEIGHT = 10.0
PREFERENCE_MISMATCH_PENALTY = 5.0
MAX_MINUTES_PENALTY = 3.0
PROTEIN_DEVIATION_PENALTY = 0.1
DISLIKED_INGREDIENT_PENALTY = 4.0
DEFAULT_TOP_N = 5


@dataclass(frozen=True)
class RankingCriteria:
    """Soft targets that lower a recipe's score instead of removing it."""

    preferences: DietaryPreferences = field(default_factory=DietaryPreferences)
    max_minutes: int | None = None
    protein_target: float | None = None
    disliked_ingredients: tuple[str, ...] = ()


@dataclass(frozen=True)
class RankedRecipe:
    """A recipe match with its computed score."""

    match: RecipeMatch
    score: float


def score_match(match: RecipeMatch, criteria: RankingCriteria) -> float:
    """Score a match by pantry coverage minus soft-target penalties."""
    recipe = match.recipe
    score = match.available_ingredients + match.coverage * COVERAGE_WEIGHT
    score -= PREFERENCE_MISMATCH_PENALTY * preference_violations(
        recipe, criteria.preferences
    )
    if criteria.max_minutes is not None and recipe.minutes > criteria.max_minutes:
        score -= MAX_MINUTES_PENALTY
    if criteria.protein_target is not None:
        protein = recipe.protein or 0.0
        score -= PROTEIN_DEVIATION_PENALTY * abs(protein - criteria.protein_target)
    if _has_disliked(match, criteria.disliked_ingredients):
        score -= DISLIKED_INGREDIENT_PENALTY
    return score


def rank_matches(
    matches: Sequence[RecipeMatch],
    criteria: RankingCriteria | None = None,
    limit: int = DEFAULT_TOP_N,
) -> list[RankedRecipe]:
    """Return the top matches by descending score.

    The sort is stable, so equal scores keep their input order.
    """
    resolved = criteria or RankingCriteria()
    ranked = [
        RankedRecipe(match=match, score=score_match(match, resolved))
        for match in matches
    ]
    ranked.sort(key=lambda item: item.score, reverse=True)
    return ranked[:limit]


def _has_disliked(match: RecipeMatch, disliked: Sequence[str]) -> bool:
    if not disliked:
        return False
    text = match.recipe.searchable_text
    for item in disliked:
        needle = item.strip().lower()
        if not needle:
            continue
        if needle in text:
            return True
        if any(names_match(needle, ing.name) for ing in match.recipe.ingredients):
            return True
    return False
