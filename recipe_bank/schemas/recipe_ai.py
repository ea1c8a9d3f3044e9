from pydantic import BaseModel, Field


class RecipeFromImageRequest(BaseModel):
    image: str = Field("", description="Base64 encoded image, optionally as a data URI")
    image_type: str = Field("", description="jpeg, jpg or png")


class RecipeFromURLRequest(BaseModel):
    url: str = Field("", description="Webpage with a recipe or a direct link to a recipe image")
