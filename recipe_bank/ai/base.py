from enum import Enum
from typing import Protocol

from .models import RecipeAnalysisResult


class ImageContentType(str, Enum):
    JPEG = "image/jpeg"
    PNG = "image/png"


class RecipeExtractor(Protocol):
    async def analyze_image(
        self, image: bytes, content_type: ImageContentType
    ) -> RecipeAnalysisResult: ...

    async def analyze_url(self, url: str) -> RecipeAnalysisResult: ...

    async def close(self) -> None: ...
