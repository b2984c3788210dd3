from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from messagely.domain.users.entities import UserDetail, UserProfile


class UserProfileDTO(BaseModel):
    username: str
    first_name: str
    last_name: str
    phone: str

    @classmethod
    def from_domain(cls, profile: UserProfile) -> UserProfileDTO:
        return cls(
            username=profile.username,
            first_name=profile.first_name,
            last_name=profile.last_name,
            phone=profile.phone,
        )


class UserDetailDTO(BaseModel):
    username: str
    first_name: str
    last_name: str
    phone: str
    join_at: datetime
    last_login_at: datetime | None

    @classmethod
    def from_domain(cls, detail: UserDetail) -> UserDetailDTO:
        return cls(
            username=detail.username,
            first_name=detail.first_name,
            last_name=detail.last_name,
            phone=detail.phone,
            join_at=detail.joined_at,
            last_login_at=detail.last_login_at,
        )
