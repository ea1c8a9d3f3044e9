from .base import Base

from sqlalchemy import Column, ForeignKey, Integer, Text, Uuid


class RecipeTag(Base):
    __tablename__ = "recipe_tags"

    id = Column(Integer, primary_key=True, autoincrement=True)
    recipe_id = Column(
        Uuid, ForeignKey("recipes.id", ondelete="CASCADE"), index=True, nullable=False
    )
    position = Column(Integer, nullable=False)
    name = Column(Text, index=True, nullable=False)
