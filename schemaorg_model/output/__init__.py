"""Output side of a run: paths, rendering and post-processing."""

from .paths import OutputPathResolver
from .renderer import Renderer, TEMPLATES_DIR, comment_block, docblock, import_line, snake_case
from .formatter import FormatterChain

__all__ = [
    "OutputPathResolver",
    "Renderer",
    "TEMPLATES_DIR",
    "comment_block",
    "docblock",
    "import_line",
    "snake_case",
    "FormatterChain",
]
