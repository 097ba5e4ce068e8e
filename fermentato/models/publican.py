"""Publican (pub owner) upgrade requests."""
import enum

from sqlalchemy import Column, String, DateTime, Text, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from fermentato.models.base import Base


class RequestStatus(str, enum.Enum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"


class PublicanRequest(Base):
    __tablename__ = "publican_requests"

    id = Column(String(36), primary_key=True, index=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    pub_name = Column(String(256), nullable=False)
    pub_address = Column(String(512), nullable=False)
    pub_city = Column(String(128), nullable=False)
    pub_region = Column(String(128), nullable=True)
    vat_number = Column(String(32), nullable=False)
    phone = Column(String(64), nullable=True)
    email = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    status = Column(String(16), nullable=False, default=RequestStatus.pending.value, index=True)
    admin_notes = Column(Text, nullable=True)
    reviewed_by = Column(String(36), ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    reviewed_at = Column(DateTime, nullable=True)
    pub_id = Column(String(36), ForeignKey("pubs.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship("User", foreign_keys=[user_id])
