from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from pydantic import BaseModel
from slugable.database import get_db
from slugable.models import Category, Post
from slugable.routes.posts import serialize_post
from slugable.routing import bind_record, commit_or_conflict

router = APIRouter()

class CategoryCreate(BaseModel):
    name: str

def serialize_category(category: Category) -> dict:
    return {"id": category.id, "name": category.name, "slug": category.slug}

@router.get("/api/categories")
async def list_categories(db: Session = Depends(get_db)):
    categories = db.query(Category).order_by(Category.name).all()
    return [serialize_category(c) for c in categories]

@router.post("/api/categories", status_code=201)
async def create_category(category: CategoryCreate, db: Session = Depends(get_db)):
    new_category = Category(name=category.name)

    db.add(new_category)
    commit_or_conflict(db)
    db.refresh(new_category)

    return serialize_category(new_category)

@router.get("/api/categories/{key}")
async def get_category(
    category: Category = Depends(bind_record(Category)),
    db: Session = Depends(get_db)
):
    posts = db.query(Post).filter(
        Post.category_id == category.id,
        Post.deleted_at.is_(None)
    ).order_by(Post.id).all()

    result = serialize_category(category)
    result["posts"] = [serialize_post(p) for p in posts]
    return result
