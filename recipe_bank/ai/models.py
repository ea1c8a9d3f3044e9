from pydantic import BaseModel, Field

from recipe_bank.schemas import Ingredient, Int32


class RecipeAnalysisResult(BaseModel):
    """Structured recipe as returned by the model."""

    title: str = ""
    description: str = ""
    ingredients: list[Ingredient] = Field(default_factory=list)
    steps: list[str] = Field(default_factory=list)
    cook_time: Int32 = 0
    servings: Int32 = 0


RECIPE_JSON_SCHEMA = {
    "type": "object",
    "properties": {
        "title": {"type": "string"},
        "description": {"type": "string"},
        "ingredients": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "name": {"type": "string"},
                    "quantity": {"type": "number"},
                    "unit": {"type": "string"},
                },
                "required": ["name", "quantity", "unit"],
                "additionalProperties": False,
            },
        },
        "steps": {"type": "array", "items": {"type": "string"}},
        "cook_time": {"type": "integer"},
        "servings": {"type": "integer"},
    },
    "required": ["title", "description", "ingredients", "steps", "cook_time", "servings"],
    "additionalProperties": False,
}
