"""Tap list and bottle list models."""
import enum

from sqlalchemy import Boolean, Column, String, Integer, Float, DateTime, Text, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from fermentato.models.base import Base
from fermentato.models.types import JSONList


class BottleSize(str, enum.Enum):
    cl33 = "0.33L"
    cl375 = "0.375L"
    cl50 = "0.5L"
    cl75 = "0.75L"
    l1 = "1L"
    l15 = "1.5L"


class TapListEntry(Base):
    """A beer on draft at a pub."""
    __tablename__ = "tap_list"

    id = Column(String(36), primary_key=True, index=True)
    pub_id = Column(String(36), ForeignKey("pubs.id"), nullable=False, index=True)
    beer_id = Column(String(36), ForeignKey("beers.id"), nullable=False, index=True)
    # Canonical [{"size": "0.4L", "price": 6.5}, ...]
    prices = Column(JSONList, nullable=False, default=list)
    # Legacy 0.2L / 0.4L / 1L columns, read only by scripts/migrate_legacy_prices.py
    price_small = Column(Float, nullable=True)
    price_medium = Column(Float, nullable=True)
    price_large = Column(Float, nullable=True)
    tap_number = Column(Integer, nullable=True)
    description = Column(Text, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    is_visible = Column(Boolean, nullable=False, default=True)
    added_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    pub = relationship("Pub", back_populates="tap_list")
    beer = relationship("Beer", lazy="joined")


class BottleListEntry(Base):
    """A bottled beer available at a pub (cantina)."""
    __tablename__ = "bottle_list"

    id = Column(String(36), primary_key=True, index=True)
    pub_id = Column(String(36), ForeignKey("pubs.id"), nullable=False, index=True)
    beer_id = Column(String(36), ForeignKey("beers.id"), nullable=False, index=True)
    prices = Column(JSONList, nullable=False, default=list)
    bottle_size = Column(String(8), nullable=False, default=BottleSize.cl33.value)
    quantity = Column(Integer, nullable=True)
    description = Column(Text, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    is_visible = Column(Boolean, nullable=False, default=True)
    added_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    pub = relationship("Pub", back_populates="bottle_list")
    beer = relationship("Beer", lazy="joined")
