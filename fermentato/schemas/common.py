"""Common schemas."""
from pydantic import BaseModel, model_validator


class InputModel(BaseModel):
    """Request body base: blank strings from HTML forms arrive as null."""

    @model_validator(mode="before")
    @classmethod
    def blank_to_none(cls, data):
        if isinstance(data, dict):
            return {
                k: (None if isinstance(v, str) and not v.strip() else v)
                for k, v in data.items()
            }
        return data
