"""
Caller identity.

Authentication happens upstream; requests reach this service with the
authenticated user in ``X-User-Id`` and, for administrators, ``X-User-Role: admin``.

Both headers are trusted as received. The gateway in front of this service must
strip them from client requests and set them itself, otherwise any caller can
claim another identity or admin access by sending them.
"""
from dataclasses import dataclass
from typing import Optional
from fastapi import Header, HTTPException


@dataclass
class CurrentUser:
    id: str
    role: str = "user"

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


def get_current_user(
    x_user_id: Optional[str] = Header(None),
    x_user_role: Optional[str] = Header(None),
) -> CurrentUser:
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=401, detail="Authentication required")
    return CurrentUser(id=x_user_id.strip(), role=(x_user_role or "user").strip().lower())
