import pytest

from recipe_bank.repositories.query import MAX_LIMIT, RecipeQuery
from recipe_bank.schemas import Ingredient, Recipe, RecipeFilter


@pytest.mark.parametrize(
    "page, limit, expected_page, expected_limit",
    [
        (1, 10, 1, 10),
        (3, 25, 3, 25),
        (0, 10, 1, 10),
        (-7, 10, 1, 10),
        (1, 0, 1, 10),
        (1, -1, 1, 10),
        (1, 100, 1, 100),
        (1, 101, 1, MAX_LIMIT),
        (2, 5000, 2, MAX_LIMIT),
    ],
)
def test_build_clamps_paging(page, limit, expected_page, expected_limit):
    query = RecipeQuery.build(RecipeFilter(), page, limit)

    assert query.page == expected_page
    assert query.limit == expected_limit


def test_build_drops_empty_values():
    query = RecipeQuery.build(
        RecipeFilter(ingredient_names=["", "egg"], tags=["vegan", ""], cook_time=-5),
        page=1,
        limit=10,
    )

    assert query.ingredient_names == ("egg",)
    assert query.tags == ("vegan",)
    assert query.max_cook_time == 0


@pytest.mark.parametrize(
    "page, limit, offset", [(1, 10, 0), (2, 10, 10), (4, 25, 75)]
)
def test_offset(page, limit, offset):
    assert RecipeQuery(page=page, limit=limit).offset == offset


@pytest.mark.parametrize(
    "total, limit, pages", [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (250, 100, 3)]
)
def test_total_pages(total, limit, pages):
    assert RecipeQuery(limit=limit).total_pages(total) == pages


class TestMatches:
    RECIPE = Recipe(
        title="Spicy Chicken Curry",
        ingredients=[
            Ingredient(name="chicken thighs", quantity=500, unit="g"),
            Ingredient(name="Curry Paste", quantity=2, unit="tbsp"),
        ],
        steps=["Cook"],
        cook_time=40,
        servings=4,
        tags=["spicy", "dinner"],
    )

    @pytest.mark.parametrize(
        "recipe_filter",
        [
            RecipeFilter(),
            RecipeFilter(title="chicken"),
            RecipeFilter(title="CURRY"),
            RecipeFilter(ingredient_names=["CHICKEN"]),
            RecipeFilter(ingredient_names=["chicken", "paste"]),
            RecipeFilter(cook_time=40),
            RecipeFilter(tags=["spicy"]),
            RecipeFilter(tags=["dinner", "spicy"]),
        ],
    )
    def test_matches(self, recipe_filter):
        assert RecipeQuery.build(recipe_filter, 1, 10).matches(self.RECIPE)

    @pytest.mark.parametrize(
        "recipe_filter",
        [
            RecipeFilter(title="beef"),
            RecipeFilter(ingredient_names=["chicken", "rice"]),
            RecipeFilter(cook_time=39),
            RecipeFilter(tags=["Spicy"]),
            RecipeFilter(tags=["spicy", "vegan"]),
        ],
    )
    def test_does_not_match(self, recipe_filter):
        assert not RecipeQuery.build(recipe_filter, 1, 10).matches(self.RECIPE)
