from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationInfo, field_validator


class UserRequest(BaseModel):
    """Schema for the user create and update requests."""
    username: str = Field(..., min_length=3, max_length=50, examples=["john_doe"])
    password: str = Field(..., min_length=6, max_length=100, examples=["s3cret!"])
    email: EmailStr = Field(..., examples=["john@example.com"])

    @field_validator("username", "password")
    @classmethod
    def not_blank(cls, v: str, info: ValidationInfo):
        if not v.strip():
            raise ValueError(f"{info.field_name.capitalize()} is required")
        return v


class UserResponse(BaseModel):
    id: int
    username: str
    email: EmailStr

    model_config = ConfigDict(from_attributes=True)
