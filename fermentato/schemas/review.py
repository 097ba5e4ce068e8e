"""Review, report and moderation schemas."""
from pydantic import Field

from fermentato.models import ReportTarget, Role
from fermentato.schemas.common import InputModel


class ReviewCreate(InputModel):
    beer_id: str
    pub_id: str | None = None
    rating: int = Field(..., ge=1, le=5)
    comment: str | None = Field(None, max_length=2000)


class ReportCreate(InputModel):
    target_type: ReportTarget
    target_id: str
    reason: str = Field(..., min_length=1, max_length=128)
    description: str | None = None


class AdminDecision(InputModel):
    admin_notes: str | None = None


class RoleChange(InputModel):
    role: Role
