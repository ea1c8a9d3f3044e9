from .base import Base

from sqlalchemy import Column, Float, ForeignKey, Integer, Text, Uuid


class RecipeIngredient(Base):
    __tablename__ = "recipe_ingredients"

    id = Column(Integer, primary_key=True, autoincrement=True)
    recipe_id = Column(
        Uuid, ForeignKey("recipes.id", ondelete="CASCADE"), index=True, nullable=False
    )
    position = Column(Integer, nullable=False)
    name = Column(Text, index=True, nullable=False)
    quantity = Column(Float, default=0, nullable=False)
    unit = Column(Text, default="", nullable=False)
