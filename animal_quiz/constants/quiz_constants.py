"""Quiz-related constants shared across UI and core layers."""

from pathlib import Path

SHARE_URL: str = "https://animal-quiz.example.com"
IMAGE_DIRECTORY: Path = Path(__file__).resolve().parent.parent / "data" / "images"
IMAGE_SUFFIX: str = ".png"
IMAGE_SIZE_PX: int = 256

DEFAULT_FONT_SIZE: int = 12
FONT_SIZE_RANGE: tuple[int, int] = (8, 28)
