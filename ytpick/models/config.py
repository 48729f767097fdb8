"""
Pydantic model for application configuration.
Provides robust validation for all settings.
"""

from pydantic import BaseModel, Field, field_validator

from ytpick.models.selection import DEFAULT_CLASSIFICATION_POLICY, ClassificationPolicy


class AppConfig(BaseModel):
    """A validated configuration model for the application."""

    # External tools
    ytdlp_path: str = "yt-dlp"
    thumbnail_helper: str = "mutagen-inspect"

    # Invocation behaviour
    quiet: bool = False
    use_dirs: bool = False

    # Selection behaviour
    classification_policy: ClassificationPolicy = DEFAULT_CLASSIFICATION_POLICY
    sponsorblock_categories: str = "default"
    sponsorblock_extractors: list[str] = Field(default_factory=lambda: ["Youtube"])

    # Internal fields not loaded from INI file
    config_path: str = Field("", repr=False)

    class Config:
        """Pydantic model configuration."""

        validate_assignment = True
        str_strip_whitespace = True

    @field_validator("ytdlp_path")
    @classmethod
    def validate_ytdlp_path(cls, v: str) -> str:
        if not v:
            raise ValueError("The yt-dlp path cannot be empty.")
        return v

    @field_validator("sponsorblock_categories")
    @classmethod
    def validate_categories(cls, v: str) -> str:
        """Normalizes the comma-separated SponsorBlock category list."""
        categories = [c.strip() for c in v.split(",") if c.strip()]
        if not categories:
            raise ValueError("At least one SponsorBlock category is required.")
        if any(" " in c for c in categories):
            raise ValueError("SponsorBlock categories cannot contain spaces.")
        return ",".join(categories)

    @field_validator("classification_policy", mode="before")
    @classmethod
    def lower_policy(cls, v):
        return v.lower() if isinstance(v, str) else v

    @classmethod
    def get_ini_keys(cls) -> set[str]:
        """Returns a set of all keys that are expected in the INI file."""
        internal_fields = {"config_path"}
        return {key for key in cls.model_fields if key not in internal_fields}
