import pytest
from fastapi import HTTPException

from slugable.mixins import route_key_name
from slugable.models import Category, Post
from slugable.routing import bind_record, resolve_route_binding


@pytest.fixture
def records(db):
    category = Category(name="Tech")
    post = Post(title="Hello World", category=category)
    trashed = Post(title="Old News")
    db.add_all([category, post, trashed])
    db.commit()
    trashed.soft_delete()
    db.commit()
    return {"category": category, "post": post, "trashed": trashed}


def test_route_key_names() -> None:
    assert route_key_name(Post) == "slug"
    assert route_key_name(Category) == "id"


def test_route_key_property(records) -> None:
    assert records["post"].route_key == "hello-world"
    assert records["category"].route_key == records["category"].id


def test_resolve_by_slug(db, records) -> None:
    assert resolve_route_binding(db, Post, "hello-world") is records["post"]
    assert resolve_route_binding(db, Post, str(records["post"].id)) is None


def test_resolve_by_primary_key(db, records) -> None:
    category = records["category"]
    assert resolve_route_binding(db, Category, str(category.id)) is category
    assert resolve_route_binding(db, Category, "tech") is None


def test_trashed_records_do_not_resolve(db, records) -> None:
    assert records["trashed"].slug == "old-news"
    assert resolve_route_binding(db, Post, "old-news") is None


def test_bind_record_raises_404(db, records) -> None:
    dependency = bind_record(Post)

    assert dependency("hello-world", db) is records["post"]
    with pytest.raises(HTTPException) as exc_info:
        dependency("missing", db)
    assert exc_info.value.status_code == 404


def test_route_key_follows_instance_override(records) -> None:
    post = records["post"]
    post.slug_use_for_routes = False

    assert route_key_name(post) == "id"
    assert post.route_key == post.id
