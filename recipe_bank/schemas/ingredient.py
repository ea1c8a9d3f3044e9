from pydantic import BaseModel


class Ingredient(BaseModel):
    name: str = ""
    quantity: float = 0
    unit: str = ""
