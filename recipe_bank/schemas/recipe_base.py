from typing import Annotated

from pydantic import BaseModel, Field

from .ingredient import Ingredient

INT32_MAX = 2**31 - 1

# range of the INTEGER columns, anything outside is a malformed value
Int32 = Annotated[int, Field(ge=-INT32_MAX - 1, le=INT32_MAX)]


class RecipeBase(BaseModel):
    # only the value range is checked here: domain rules live in
    # services.validation so they are reported as validation errors
    title: str = ""
    description: str = ""
    ingredients: list[Ingredient] = Field(default_factory=list)
    steps: list[str] = Field(default_factory=list)
    cook_time: Int32 = 0
    servings: Int32 = 0
    tags: list[str] = Field(default_factory=list)
