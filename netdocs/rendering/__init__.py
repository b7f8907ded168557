"""HTML rendering of the parsed documentation model."""

from .renderer import HtmlRenderer, singular_to_plural

__all__ = ["HtmlRenderer", "singular_to_plural"]
