"""User model."""

from sqlalchemy import Column, DateTime, Enum, Integer, String, Text, func

from tourism.db.base import Base

USER_ROLES = ("user", "admin")


class User(Base):
    """Signed-in identity; ``role`` is the only authorization attribute."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    open_id = Column(String(64), nullable=False, unique=True, index=True)  # external identity key
    name = Column(Text)
    email = Column(String(320))
    login_method = Column(String(64))
    role = Column(Enum(*USER_ROLES, name="user_role"), nullable=False, default="user")
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())
    last_signed_in = Column(DateTime, nullable=False, server_default=func.now())
