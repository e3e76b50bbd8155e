from sqlalchemy import Column, String, Integer, Text, ForeignKey
from sqlalchemy.orm import relationship
from slugable.database import Base
from slugable.mixins import SluggableMixin, SoftDeleteMixin

class Category(SluggableMixin, Base):
    __tablename__ = "categories"

    slug_source_field = "name"
    slug_language = "en"
    slug_max_length = 100

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    slug = Column(String, unique=True, index=True, nullable=True)

    posts = relationship("Post", back_populates="category")

class Post(SluggableMixin, SoftDeleteMixin, Base):
    __tablename__ = "posts"

    slug_use_for_routes = True

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    body = Column(Text, nullable=True)
    slug = Column(String, unique=True, index=True, nullable=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=True)

    category = relationship("Category", back_populates="posts")
