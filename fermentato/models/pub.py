"""Pub and PubRating models."""
from sqlalchemy import Boolean, Column, String, Integer, Float, DateTime, Text, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from fermentato.models.base import Base
from fermentato.models.types import JSONDict


class Pub(Base):
    __tablename__ = "pubs"

    id = Column(String(36), primary_key=True, index=True)
    name = Column(String(256), nullable=False, index=True)
    address = Column(String(512), nullable=False)
    city = Column(String(128), nullable=False, index=True)
    region = Column(String(128), nullable=False, default="")
    postal_code = Column(String(16), nullable=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    phone = Column(String(64), nullable=True)
    email = Column(String(255), nullable=True)
    website_url = Column(String(512), nullable=True)
    description = Column(Text, nullable=True)
    image_url = Column(String(512), nullable=True)
    logo_url = Column(String(512), nullable=True)
    cover_image_url = Column(String(512), nullable=True)
    rating = Column(Float, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)
    is_verified = Column(Boolean, nullable=False, default=False)
    # {"monday": {"open": "18:00", "close": "02:00", "isClosed": false}, ...}
    opening_hours = Column(JSONDict, nullable=True)
    facebook_url = Column(String(512), nullable=True)
    instagram_url = Column(String(512), nullable=True)
    twitter_url = Column(String(512), nullable=True)
    tiktok_url = Column(String(512), nullable=True)
    owner_id = Column(String(36), ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    vat_number = Column(String(32), nullable=True)
    business_name = Column(String(256), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    owner = relationship("User", back_populates="pubs")
    tap_list = relationship("TapListEntry", back_populates="pub", cascade="all, delete-orphan")
    bottle_list = relationship("BottleListEntry", back_populates="pub", cascade="all, delete-orphan")
    menu_categories = relationship(
        "MenuCategory",
        back_populates="pub",
        order_by="MenuCategory.order_index",
        cascade="all, delete-orphan",
    )


class PubRating(Base):
    """One star rating per user per pub."""
    __tablename__ = "pub_ratings"
    __table_args__ = (UniqueConstraint("user_id", "pub_id", name="uq_user_pub_rating"),)

    id = Column(String(36), primary_key=True, index=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    pub_id = Column(String(36), ForeignKey("pubs.id", ondelete="CASCADE"), nullable=False, index=True)
    rating = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
