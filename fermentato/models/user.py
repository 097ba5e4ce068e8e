"""User, OAuth account link and session models."""
import enum

from sqlalchemy import Boolean, Column, String, DateTime, Text, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from fermentato.models.base import Base
from fermentato.models.types import JSONDict, JSONList


class Role(str, enum.Enum):
    customer = "customer"
    pub_owner = "pub_owner"
    admin = "admin"


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=True, index=True)
    hashed_password = Column(String(255), nullable=True)  # None for OAuth-only users
    first_name = Column(String(128), nullable=True)
    last_name = Column(String(128), nullable=True)
    nickname = Column(String(64), unique=True, nullable=True)
    bio = Column(Text, nullable=True)
    profile_image_url = Column(String(512), nullable=True)
    roles = Column(JSONList, nullable=False, default=lambda: [Role.customer.value])
    active_role = Column(String(16), nullable=False, default=Role.customer.value)
    is_email_verified = Column(Boolean, nullable=False, default=False)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    oauth_accounts = relationship("OAuthAccount", back_populates="user", cascade="all, delete-orphan")
    sessions = relationship("UserSession", back_populates="user", cascade="all, delete-orphan")
    pubs = relationship("Pub", back_populates="owner")

    def has_role(self, role: Role) -> bool:
        return role.value in (self.roles or [])


class OAuthAccount(Base):
    """Link between a user and an external identity provider account."""
    __tablename__ = "oauth_accounts"
    __table_args__ = (UniqueConstraint("provider", "provider_user_id", name="uq_oauth_provider_user"),)

    id = Column(String(36), primary_key=True, index=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    provider = Column(String(32), nullable=False)
    provider_user_id = Column(String(128), nullable=False)
    access_token = Column(Text, nullable=True)
    refresh_token = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    user = relationship("User", back_populates="oauth_accounts")


class UserSession(Base):
    """Server-side login session referenced by the session cookie."""
    __tablename__ = "sessions"

    sid = Column(String(64), primary_key=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    data = Column(JSONDict, nullable=True)
    expire = Column(DateTime, nullable=False, index=True)

    user = relationship("User", back_populates="sessions")
