"""Brand color models and the fallback palette."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .base import FrozenModel


class BrandColors(FrozenModel):
    """The four brand color strings every template is painted with."""

    primary: str
    secondary: str
    accent: str
    text: str


DEFAULT_BRAND_COLORS = BrandColors(
    primary="#2D5A27",
    secondary="#D4A574",
    accent="#8B4513",
    text="#FFFFFF",
)


class BrandBibleColors(BaseModel):
    """Color block of an upstream brand bible; every field may be missing."""

    model_config = ConfigDict(extra="ignore")

    primary: str | None = None
    secondary: str | None = None
    accent: str | None = None
    text: str | None = None


class BrandBible(BaseModel):
    """Subset of the brand bible payload this package reads.

    Only ``colors`` is consumed; logos and typography are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    colors: BrandBibleColors = Field(default_factory=BrandBibleColors)

    def resolve_colors(self, fallback: BrandColors = DEFAULT_BRAND_COLORS) -> BrandColors:
        """Merge with *fallback*, replacing missing or blank fields."""
        c = self.colors
        return BrandColors(
            primary=(c.primary or "").strip() or fallback.primary,
            secondary=(c.secondary or "").strip() or fallback.secondary,
            accent=(c.accent or "").strip() or fallback.accent,
            text=(c.text or "").strip() or fallback.text,
        )
