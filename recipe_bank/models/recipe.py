from .base import Base, UTCDateTime

from sqlalchemy import JSON, Column, Integer, Text, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship


class Recipe(Base):
    __tablename__ = "recipes"

    id = Column(Uuid, primary_key=True)
    title = Column(Text, index=True, nullable=False)
    description = Column(Text, default="", nullable=False)
    steps = Column(JSON().with_variant(JSONB(), "postgresql"), default=list, nullable=False)
    cook_time = Column(Integer, nullable=False)
    servings = Column(Integer, nullable=False)
    created_at = Column(UTCDateTime, index=True, nullable=False)
    updated_at = Column(UTCDateTime, nullable=False)

    ingredients = relationship(
        "RecipeIngredient",
        order_by="RecipeIngredient.position",
        cascade="all, delete-orphan",
        lazy="selectin",
    )
    tags = relationship(
        "RecipeTag",
        order_by="RecipeTag.position",
        cascade="all, delete-orphan",
        lazy="selectin",
    )
