"""Category model."""

from sqlalchemy import Column, DateTime, Integer, String, Text, func

from tourism.db.base import Base


class Category(Base):
    """Named place category with an optional cover image."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, unique=True)
    image_url = Column(Text)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())
