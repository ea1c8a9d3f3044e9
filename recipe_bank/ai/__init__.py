from .base import ImageContentType, RecipeExtractor
from .models import RecipeAnalysisResult

__all__ = [
    "ImageContentType",
    "RecipeExtractor",
    "RecipeAnalysisResult"
]
