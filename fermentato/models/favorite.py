"""Favorite and BeerTasting models."""
import enum

from sqlalchemy import Column, String, Integer, DateTime, Text, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from fermentato.models.base import Base


class ItemType(str, enum.Enum):
    pub = "pub"
    brewery = "brewery"
    beer = "beer"


class TastingFormat(str, enum.Enum):
    spina = "spina"
    bottiglia = "bottiglia"
    lattina = "lattina"
    boccale = "boccale"


class Favorite(Base):
    __tablename__ = "favorites"
    __table_args__ = (UniqueConstraint("user_id", "item_type", "item_id", name="uq_favorite_item"),)

    id = Column(String(36), primary_key=True, index=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    item_type = Column(String(16), nullable=False)
    item_id = Column(String(36), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class BeerTasting(Base):
    """Personal log entry: a user drank a beer, optionally at a pub."""
    __tablename__ = "beer_tastings"
    __table_args__ = (UniqueConstraint("user_id", "beer_id", name="uq_user_beer_tasting"),)

    id = Column(String(36), primary_key=True, index=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    beer_id = Column(String(36), ForeignKey("beers.id"), nullable=False)
    pub_id = Column(String(36), ForeignKey("pubs.id", ondelete="SET NULL"), nullable=True)
    rating = Column(Integer, nullable=True)
    format = Column(String(16), nullable=False, default=TastingFormat.spina.value)
    personal_notes = Column(Text, nullable=True)
    tasted_at = Column(DateTime(timezone=True), server_default=func.now())
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    beer = relationship("Beer", lazy="joined")
    pub = relationship("Pub")
