"""Tests for score-based ranking."""

import pytest

from replate.domain.preferences import DietaryPreferences
from replate.domain.recipes import RecipeMatch
from replate.services.ranking import RankingCriteria, rank_matches, score_match
from tests.conftest import make_recipe


def _match(title: str, available: int, total: int, **recipe_fields) -> RecipeMatch:
    return RecipeMatch(
        recipe=make_recipe(title, **recipe_fields),
        available_ingredients=available,
        total_ingredients=total,
        coverage=available / total,
    )


def test_score_is_available_plus_weighted_coverage() -> None:
    assert score_match(_match("A", 2, 5), RankingCriteria()) == pytest.approx(6.0)


def test_rank_orders_by_score_and_truncates() -> None:
    matches = [_match(f"R{index}", index, 6) for index in range(1, 8)]

    ranked = rank_matches(matches, limit=5)

    assert [item.match.recipe.title for item in ranked] == [
        "R7",
        "R6",
        "R5",
        "R4",
        "R3",
    ]


def test_ties_keep_input_order() -> None:
    matches = [_match("First", 1, 5), _match("Second", 1, 5), _match("Third", 2, 5)]

    ranked = rank_matches(matches)

    assert [item.match.recipe.title for item in ranked] == ["Third", "First", "Second"]


def test_soft_penalties_lower_score() -> None:
    slow = _match("Slow Roast", 3, 5, minutes=90, protein=20, instructions="Add pork.")
    criteria = RankingCriteria(
        preferences=DietaryPreferences(diet="halal"),
        max_minutes=30,
        protein_target=30,
        disliked_ingredients=("pork",),
    )

    # 3 + 6 - 5 (diet) - 3 (minutes) - 1 (protein) - 4 (disliked)
    assert score_match(slow, criteria) == pytest.approx(-4.0)


def test_disliked_ingredient_matches_ingredient_names() -> None:
    match = RecipeMatch(
        recipe=make_recipe("Soup", ("Cilantro Leaves", 1, "cups")),
        available_ingredients=0,
        total_ingredients=1,
        coverage=0.0,
    )
    criteria = RankingCriteria(disliked_ingredients=("cilantro",))

    assert score_match(match, criteria) == pytest.approx(-4.0)
