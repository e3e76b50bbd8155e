import logging
from sqlalchemy import and_, event, inspect, not_
from sqlalchemy.orm import Session
from slugable.config import SlugConfig
from slugable.generator import generate_slug
from slugable.mixins import SluggableMixin, supports_soft_delete

logger = logging.getLogger(__name__)


class SessionRecord:
    """
    Exposes a mapped instance to ``generate_slug``.

    Existence checks run against the session's database plus the values
    held by other records in the same flush (``pending``, slug -> owner).
    """

    def __init__(self, session: Session, instance, config: SlugConfig, pending: dict = None):
        self.session = session
        self.instance = instance
        self.config = config
        self.pending = pending if pending is not None else {}

    def get_field(self, name: str):
        return getattr(self.instance, name, None)

    def set_field(self, name: str, value: str) -> None:
        setattr(self.instance, name, value)

    def include_trashed(self) -> bool:
        if not supports_soft_delete(self.instance):
            return False
        if self.config.include_trashed is None:
            return True
        return self.config.include_trashed

    def query_exists(self, field: str, value: str) -> bool:
        """
        Whether another record already holds ``value`` in ``field``.

        The check and the later INSERT/UPDATE are not atomic: two sessions can
        both see a value as free. Put a unique index on the slug column so the
        database rejects the loser of that race.
        """
        owner = self.pending.get(value)
        if owner is not None and owner is not self.instance:
            return True

        model = type(self.instance)
        query = self.session.query(model).filter(getattr(model, field) == value)

        state = inspect(self.instance)
        if state.has_identity:
            mapper = state.mapper
            query = query.filter(not_(and_(*[
                column == key_value for column, key_value in zip(mapper.primary_key, state.identity)
            ])))

        if supports_soft_delete(model) and not self.include_trashed():
            query = query.filter(model.deleted_at.is_(None))

        with self.session.no_autoflush:
            return self.session.query(query.exists()).scalar()


def generate_pending_slugs(session: Session, flush_context=None, instances=None):
    """``before_flush`` hook: fill slugs on new and modified sluggable records."""
    flushed = []
    assigned = {}
    for instance in list(session.new) + list(session.dirty):
        if not isinstance(instance, SluggableMixin):
            continue

        config = instance.slug_config()
        pending = assigned.setdefault((type(instance), config.destination_field), {})
        current = getattr(instance, config.destination_field, None)
        if current:
            pending.setdefault(current, instance)
        flushed.append((instance, config, pending))

    for instance, config, pending in flushed:
        slug = generate_slug(SessionRecord(session, instance, config, pending), config)
        if slug:
            pending[slug] = instance


def register_slug_events(target=Session):
    """Attach slug generation to a Session class or sessionmaker."""
    # event.contains() keys on id(), which a collected sessionmaker can hand down to a new one.
    # A sessionmaker's class_ subclasses Session, so the mark is inherited from Session.
    marker = getattr(target, "class_", target)
    if not getattr(marker, "_slugable_registered", False):
        event.listen(target, "before_flush", generate_pending_slugs)
        marker._slugable_registered = True
        logger.info(f"Slug generation registered on {target!r}")
    return target
