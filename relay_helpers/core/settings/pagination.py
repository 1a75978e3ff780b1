"""Pagination settings for connection resolvers.

Centralized page size limits keep every connection field consistent and
make it easy to tune them per deployment.

Environment variables use PAGINATION_ prefix.
Example: PAGINATION_DEFAULT_PAGE_SIZE=20, PAGINATION_MAX_PAGE_SIZE=100
"""

from __future__ import annotations

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PaginationSettings(BaseSettings):
    """Pagination configuration settings.

    Attributes:
        default_page_size: Page size applied by ``resolve_page_size`` (and
            ``PageRequest.from_arguments(..., use_default=True)``) when a
            client omits ``first``.
        max_page_size: Hard upper bound applied to a requested ``first``.

    Example:
        settings = PaginationSettings()
        page_request = PageRequest.from_arguments(first, after, settings=settings)
    """

    default_page_size: int = Field(
        default=50,
        ge=1,
        le=1000,
        description="Default page size when first is not specified",
    )
    max_page_size: int = Field(
        default=100,
        ge=1,
        le=10000,
        description="Maximum allowed page size (hard limit)",
    )

    model_config = SettingsConfigDict(
        env_prefix="PAGINATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )

    @model_validator(mode="after")
    def validate_default_within_max(self) -> PaginationSettings:
        """Ensure the default page size never exceeds the hard limit."""
        if self.default_page_size > self.max_page_size:
            msg = "default_page_size must not exceed max_page_size"
            raise ValueError(msg)
        return self

    def clamp(self, first: int) -> int:
        """Clamp a requested page size to ``max_page_size``."""
        return min(first, self.max_page_size)

    def resolve_page_size(self, first: int | None) -> int:
        """Page size to use for a request, falling back to ``default_page_size``.

        Example:
            settings.resolve_page_size(None)   # 50
            settings.resolve_page_size(500)    # 100
        """
        if first is None:
            return self.default_page_size
        return self.clamp(first)
