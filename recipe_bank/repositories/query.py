import math

from pydantic import BaseModel, ConfigDict

from recipe_bank.schemas import Recipe, RecipeFilter

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


class RecipeQuery(BaseModel):
    """
    Backend-agnostic description of a filtered, paginated listing.

    Storage adapters translate it into their own query language; ``matches``
    is the reference semantics for adapters that filter in process.
    """

    model_config = ConfigDict(frozen=True)

    title: str = ""
    ingredient_names: tuple[str, ...] = ()
    max_cook_time: int = 0
    tags: tuple[str, ...] = ()
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @classmethod
    def build(cls, recipe_filter: RecipeFilter, page: int, limit: int) -> "RecipeQuery":
        if page < 1:
            page = DEFAULT_PAGE
        if limit < 1:
            limit = DEFAULT_LIMIT
        if limit > MAX_LIMIT:
            limit = MAX_LIMIT

        return cls(
            title=recipe_filter.title,
            ingredient_names=tuple(n for n in recipe_filter.ingredient_names if n),
            max_cook_time=max(recipe_filter.cook_time, 0),
            tags=tuple(t for t in recipe_filter.tags if t),
            page=page,
            limit=limit,
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def total_pages(self, total: int) -> int:
        return math.ceil(total / self.limit)

    def matches(self, recipe: Recipe) -> bool:
        if self.title and self.title.lower() not in recipe.title.lower():
            return False

        names = [i.name.lower() for i in recipe.ingredients]
        for wanted in self.ingredient_names:
            if not any(wanted.lower() in name for name in names):
                return False

        if self.max_cook_time and recipe.cook_time > self.max_cook_time:
            return False

        return set(self.tags).issubset(recipe.tags)
