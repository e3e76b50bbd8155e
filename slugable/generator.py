import logging
from typing import Any, Optional, Protocol
from slugable.config import SlugConfig
from slugable.utils.slugify import create_slug, ensure_unique_slug

logger = logging.getLogger(__name__)


class SlugTarget(Protocol):
    """What a record has to offer for its slug to be generated."""

    def get_field(self, name: str) -> Any:
        ...

    def set_field(self, name: str, value: str) -> None:
        ...

    def query_exists(self, field: str, value: str) -> bool:
        ...


def generate_slug(record: SlugTarget, config: SlugConfig) -> Optional[str]:
    """
    Fill the record's destination field from its source field.

    Nothing happens when the destination already holds a value (unless
    ``force_update`` is set) or when the source is empty. Errors raised by
    ``record.query_exists`` are not caught. The existence check and the write
    are not atomic, so concurrent saves can pick the same slug; a unique index
    on the destination column is the real guarantee.

    Returns the slug written, or None when the record was left alone.
    """
    current = record.get_field(config.destination_field)
    if current and not config.force_update:
        return None

    source = record.get_field(config.source_field)
    if not source:
        return None

    slug = create_slug(str(source), config)
    if not slug:
        logger.debug(f"Source {config.source_field!r} produced an empty slug, leaving {config.destination_field!r} unset")
        return None

    if config.unique:
        slug = ensure_unique_slug(
            slug,
            lambda value: record.query_exists(config.destination_field, value),
            field=config.destination_field,
            separator=config.separator,
            max_length=config.max_length,
        )

    record.set_field(config.destination_field, slug)
    logger.debug(f"Generated slug {slug!r} for field {config.destination_field!r}")
    return slug
