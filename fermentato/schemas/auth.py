"""Auth schemas."""
from pydantic import EmailStr, Field, field_validator

from fermentato.models import Role
from fermentato.schemas.common import InputModel


class RegisterRequest(InputModel):
    email: EmailStr
    password: str = Field(..., min_length=8)
    first_name: str | None = Field(None, max_length=128)
    last_name: str | None = Field(None, max_length=128)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()


class LoginRequest(InputModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()


class SwitchRoleRequest(InputModel):
    role: Role


class BecomePublicanRequest(InputModel):
    pub_name: str = Field(..., min_length=1, max_length=256)
    pub_address: str = Field(..., min_length=1, max_length=512)
    pub_city: str = Field(..., min_length=1, max_length=128)
    pub_region: str | None = None
    vat_number: str = Field(..., min_length=11, max_length=32)
    phone: str | None = None
    email: EmailStr | None = None
    description: str | None = None
