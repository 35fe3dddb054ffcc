"""Place model."""

from sqlalchemy import Column, DateTime, Integer, String, Text, func

from tourism.db.base import Base


class Place(Base):
    """Point of interest shown to visitors."""

    __tablename__ = "places"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String(100), nullable=False, index=True)  # matches Category.name by value
    latitude = Column(String(50), nullable=False)
    longitude = Column(String(50), nullable=False)
    image_url = Column(Text)
    video_url = Column(Text)
    audio_url = Column(Text)  # narrated audio guide
    view_count = Column(Integer, nullable=False, default=0, server_default="0")
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())
