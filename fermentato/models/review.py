"""Beer review and content report models."""
import enum

from sqlalchemy import Column, String, Integer, DateTime, Text, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from fermentato.models.base import Base


class ReviewStatus(str, enum.Enum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"


class ReportStatus(str, enum.Enum):
    pending = "pending"
    resolved = "resolved"
    dismissed = "dismissed"


class ReportTarget(str, enum.Enum):
    review = "review"
    user = "user"
    pub = "pub"
    beer = "beer"


class Review(Base):
    __tablename__ = "reviews"

    id = Column(String(36), primary_key=True, index=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    beer_id = Column(String(36), ForeignKey("beers.id"), nullable=False, index=True)
    pub_id = Column(String(36), ForeignKey("pubs.id", ondelete="SET NULL"), nullable=True)
    rating = Column(Integer, nullable=False)
    comment = Column(Text, nullable=True)
    status = Column(String(16), nullable=False, default=ReviewStatus.pending.value, index=True)
    reviewed_by = Column(String(36), ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    reviewed_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    user = relationship("User", foreign_keys=[user_id])
    beer = relationship("Beer")


class Report(Base):
    """User-submitted flag on a review, user, pub or beer."""
    __tablename__ = "reports"

    id = Column(String(36), primary_key=True, index=True)
    reporter_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    target_type = Column(String(16), nullable=False)
    target_id = Column(String(36), nullable=False)
    reason = Column(String(128), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(String(16), nullable=False, default=ReportStatus.pending.value, index=True)
    reviewed_by = Column(String(36), ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    reviewed_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    reporter = relationship("User", foreign_keys=[reporter_id])
