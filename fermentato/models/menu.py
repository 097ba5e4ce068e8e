"""Food menu models."""
from sqlalchemy import Boolean, Column, String, Integer, Float, DateTime, Text, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from fermentato.models.base import Base
from fermentato.models.types import JSONList


class MenuCategory(Base):
    __tablename__ = "menu_categories"

    id = Column(String(36), primary_key=True, index=True)
    pub_id = Column(String(36), ForeignKey("pubs.id"), nullable=False, index=True)
    name = Column(String(128), nullable=False)
    description = Column(Text, nullable=True)
    is_visible = Column(Boolean, nullable=False, default=True)
    order_index = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    pub = relationship("Pub", back_populates="menu_categories")
    items = relationship(
        "MenuItem",
        back_populates="category",
        order_by="MenuItem.order_index",
        cascade="all, delete-orphan",
    )


class MenuItem(Base):
    __tablename__ = "menu_items"

    id = Column(String(36), primary_key=True, index=True)
    category_id = Column(String(36), ForeignKey("menu_categories.id"), nullable=False, index=True)
    name = Column(String(256), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Float, nullable=False)
    allergens = Column(JSONList, nullable=False, default=list)  # free text, e.g. "Glutine"
    is_visible = Column(Boolean, nullable=False, default=True)
    is_available = Column(Boolean, nullable=False, default=True)
    image_url = Column(String(512), nullable=True)
    order_index = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    category = relationship("MenuCategory", back_populates="items")
