"""Shared favorite list models."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import relationship

from tourism.db.base import Base


class SharedFavoriteList(Base):
    """Curated list of places readable by anyone holding ``share_id``."""

    __tablename__ = "shared_favorite_lists"

    id = Column(Integer, primary_key=True, index=True)
    share_id = Column(String(32), nullable=False, unique=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text)
    view_count = Column(Integer, nullable=False, default=0, server_default="0")
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())

    entries = relationship(
        "SharedFavoriteListPlace",
        back_populates="shared_list",
        cascade="all, delete-orphan",
        order_by="SharedFavoriteListPlace.position",
    )
    creator = relationship("User")


class SharedFavoriteListPlace(Base):
    """One place in a shared list; ``position`` keeps the order it was shared in."""

    __tablename__ = "shared_favorite_list_places"

    list_id = Column(
        Integer, ForeignKey("shared_favorite_lists.id", ondelete="CASCADE"), primary_key=True
    )
    position = Column(Integer, primary_key=True)
    place_id = Column(Integer, ForeignKey("places.id", ondelete="CASCADE"), nullable=False, index=True)

    shared_list = relationship("SharedFavoriteList", back_populates="entries")
    place = relationship("Place")
