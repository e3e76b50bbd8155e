from datetime import datetime, timezone
from sqlalchemy import Column, DateTime, inspect
from slugable.config import SlugConfig, resolve_slug_config


class SluggableMixin:
    """
    Marks a mapped model whose slug is filled in on flush.

    Override any ``SlugConfig`` field with a ``slug_<field>`` class attribute,
    e.g. ``slug_source_field = "name"``.
    """

    def slug_config(self) -> SlugConfig:
        return resolve_slug_config(self)

    @property
    def route_key(self):
        return getattr(self, route_key_name(self))


class SoftDeleteMixin:
    deleted_at = Column(DateTime(timezone=True), nullable=True, index=True)

    @property
    def is_trashed(self) -> bool:
        return self.deleted_at is not None

    def soft_delete(self):
        self.deleted_at = datetime.now(timezone.utc)

    def restore(self):
        self.deleted_at = None


def supports_soft_delete(model) -> bool:
    if not isinstance(model, type):
        model = type(model)
    return issubclass(model, SoftDeleteMixin)


def route_key_name(model) -> str:
    """Attribute used to look a record up from a URL segment (model class or instance)."""
    config = resolve_slug_config(model)
    if not isinstance(model, type):
        model = type(model)
    if config.use_for_routes:
        return config.destination_field

    mapper = inspect(model)
    return mapper.get_property_by_column(mapper.primary_key[0]).key
