from fastapi import Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from slugable.database import get_db
from slugable.mixins import route_key_name, supports_soft_delete


def resolve_route_binding(db: Session, model, value: str):
    """
    Find the record a URL segment refers to.

    Looks up by slug for models with ``slug_use_for_routes``, otherwise by
    primary key. Soft-deleted records never match.
    """
    key = route_key_name(model)
    attribute = getattr(model, key)

    if attribute.type.python_type is int:
        try:
            value = int(value)
        except ValueError:
            return None

    query = db.query(model).filter(attribute == value)
    if supports_soft_delete(model):
        query = query.filter(model.deleted_at.is_(None))
    return query.first()


def bind_record(model):
    """FastAPI dependency resolving the ``{key}`` path parameter to a record or 404."""

    def dependency(key: str, db: Session = Depends(get_db)):
        record = resolve_route_binding(db, model, key)
        if record is None:
            raise HTTPException(status_code=404, detail=f"{model.__name__} not found")
        return record

    return dependency


def commit_or_conflict(db: Session):
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="Slug already in use")
