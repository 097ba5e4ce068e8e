"""Brewery and Beer models."""
from sqlalchemy import Boolean, Column, String, Integer, Float, DateTime, Text, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from fermentato.models.base import Base


class Brewery(Base):
    __tablename__ = "breweries"

    id = Column(String(36), primary_key=True, index=True)
    name = Column(String(256), nullable=False, index=True)
    location = Column(String(256), nullable=False, default="")
    region = Column(String(128), nullable=False, default="")
    country = Column(String(128), nullable=True)
    description = Column(Text, nullable=True)
    logo_url = Column(String(512), nullable=True)
    website_url = Column(String(512), nullable=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    rating = Column(Float, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    beers = relationship("Beer", back_populates="brewery", order_by="Beer.name")


class Beer(Base):
    __tablename__ = "beers"

    id = Column(String(36), primary_key=True, index=True)
    name = Column(String(256), nullable=False, index=True)
    brewery_id = Column(String(36), ForeignKey("breweries.id"), nullable=False, index=True)
    style = Column(String(128), nullable=False)
    abv = Column(Float, nullable=True)
    ibu = Column(Integer, nullable=True)
    description = Column(Text, nullable=True)
    logo_url = Column(String(512), nullable=True)
    image_url = Column(String(512), nullable=True)
    bottle_image_url = Column(String(512), nullable=True)
    color = Column(String(64), nullable=True)
    is_bottled = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    brewery = relationship("Brewery", back_populates="beers")
