import logging
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

SUPPORTED_LANGUAGES = ("fa", "ar", "en")
DEFAULT_LANGUAGE = "fa"


class SlugConfig(BaseModel):
    """
    Slug generation settings for one record.

    Built fresh on every save from the record's ``slug_*`` attributes, so a
    model class can override any field with a class attribute (for example
    ``slug_language = "en"``) and a single instance can override it again.
    """

    model_config = ConfigDict(frozen=True)

    source_field: str = "title"
    destination_field: str = "slug"
    separator: str = Field("-", min_length=1, max_length=1)
    language: str = DEFAULT_LANGUAGE
    max_length: int = Field(250, ge=1)
    force_update: bool = False
    unique: bool = True
    use_for_routes: bool = False
    transliterate: bool = False
    lowercase: bool = True
    # None: include soft-deleted rows in collision checks when the model supports soft deletes
    include_trashed: Optional[bool] = None

    @field_validator("language", mode="before")
    @classmethod
    def fallback_language(cls, value):
        if value not in SUPPORTED_LANGUAGES:
            logger.warning(f"Unsupported slug language {value!r}, falling back to {DEFAULT_LANGUAGE!r}")
            return DEFAULT_LANGUAGE
        return value


def resolve_slug_config(record) -> SlugConfig:
    """Read ``slug_<field>`` overrides from a record or model class."""
    overrides = {}
    for name in SlugConfig.model_fields:
        value = getattr(record, f"slug_{name}", None)
        if value is not None:
            overrides[name] = value
    return SlugConfig(**overrides)
