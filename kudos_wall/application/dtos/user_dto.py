# kudos_wall/application/dtos/user_dto.py

"""
DTOs for user data.

Covers registration, login and logout payloads as well as the role
management responses.
"""

from uuid import UUID
from datetime import datetime
from typing import List, Optional
from pydantic import EmailStr, Field, field_validator

from kudos_wall.application.dtos.base_dto import CustomBaseModel
from kudos_wall.domain.models.user_domain_model import UserRole
from kudos_wall.shared.utils.input_validation import InputValidator


class UserRegister(CustomBaseModel):
    """
    Registration payload.
    """
    email: EmailStr = Field(..., description="User email. Must be valid and unique.")
    name: str = Field(..., description="Display name, 1 to 100 characters.")
    password: str = Field(
        ...,
        description="8 to 100 characters, at most 72 UTF-8 bytes, with upper, lower, digit and special character.",
    )

    @field_validator("email")
    def validate_email_length(cls, v):
        is_valid, error_msg = InputValidator.validate_email(v)
        if not is_valid:
            raise ValueError(error_msg)
        return v

    @field_validator("name")
    def validate_name(cls, v):
        is_valid, error_msg = InputValidator.validate_name(v)
        if not is_valid:
            raise ValueError(error_msg)
        return v.strip()

    @field_validator("password")
    def validate_password_security(cls, v):
        """
        Enforces the password policy.

        Raises:
            ValueError: If the password does not meet the requirements
        """
        is_valid, error_msg = InputValidator.validate_password(v)
        if not is_valid:
            raise ValueError(error_msg)
        return v


class UserLogin(CustomBaseModel):
    email: EmailStr = Field(..., description="Registered email.")
    password: str = Field(..., min_length=1, description="Account password.")


class RegisterUserOutput(CustomBaseModel):
    """
    Registered user plus an access token. The password is never included.
    """
    id: UUID
    email: str
    name: str
    role: UserRole
    created_at: datetime
    token: str


class LoginUserSummary(CustomBaseModel):
    id: UUID
    email: str
    role: UserRole


class LoginUserOutput(CustomBaseModel):
    user: LoginUserSummary
    token: str


class LogoutOutput(CustomBaseModel):
    success: bool = True
    message: str = "Successfully logged out"


class UpdateUserRoleInput(CustomBaseModel):
    new_role: UserRole = Field(..., description="One of TEAM_MEMBER, TECH_LEAD, ADMIN (case-sensitive).")


class UserRoleOutput(CustomBaseModel):
    id: UUID
    email: str
    role: UserRole
    updated_at: Optional[datetime] = None


class TeamMemberOutput(CustomBaseModel):
    id: UUID
    name: str
    email: str
    role: UserRole


class TeamMembersOutput(CustomBaseModel):
    team_members: List[TeamMemberOutput]


class UserListItem(CustomBaseModel):
    id: UUID
    email: str
    name: str
    role: UserRole
    created_at: datetime


class UserListOutput(CustomBaseModel):
    users: List[UserListItem]
