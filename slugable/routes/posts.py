from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from pydantic import BaseModel
from typing import Optional
from slugable.database import get_db
from slugable.models import Post
from slugable.routing import bind_record, commit_or_conflict

router = APIRouter()

class PostCreate(BaseModel):
    title: str
    body: Optional[str] = None
    slug: Optional[str] = None
    category_id: Optional[int] = None

class PostUpdate(BaseModel):
    title: Optional[str] = None
    body: Optional[str] = None
    slug: Optional[str] = None
    category_id: Optional[int] = None

def serialize_post(post: Post) -> dict:
    return {
        "id": post.id,
        "title": post.title,
        "body": post.body,
        "slug": post.slug,
        "category_id": post.category_id,
        "route_key": post.route_key
    }

@router.get("/api/posts")
async def list_posts(db: Session = Depends(get_db)):
    posts = db.query(Post).filter(Post.deleted_at.is_(None)).order_by(Post.id).all()
    return [serialize_post(p) for p in posts]

@router.post("/api/posts", status_code=201)
async def create_post(post: PostCreate, db: Session = Depends(get_db)):
    new_post = Post(
        title=post.title,
        body=post.body,
        slug=post.slug or None,
        category_id=post.category_id
    )

    db.add(new_post)
    commit_or_conflict(db)
    db.refresh(new_post)

    return serialize_post(new_post)

@router.get("/api/posts/{key}")
async def get_post(post: Post = Depends(bind_record(Post))):
    return serialize_post(post)

@router.put("/api/posts/{key}")
async def update_post(
    data: PostUpdate,
    post: Post = Depends(bind_record(Post)),
    db: Session = Depends(get_db)
):
    if data.title is not None:
        post.title = data.title
    if data.body is not None:
        post.body = data.body
    if data.category_id is not None:
        post.category_id = data.category_id
    if data.slug is not None:
        # An empty slug asks for a fresh one from the title
        post.slug = data.slug or None

    commit_or_conflict(db)
    db.refresh(post)
    return serialize_post(post)

@router.delete("/api/posts/{key}")
async def delete_post(
    post: Post = Depends(bind_record(Post)),
    db: Session = Depends(get_db)
):
    post.soft_delete()
    db.commit()
    return {"success": True}
