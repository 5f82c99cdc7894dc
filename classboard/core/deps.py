# /classboard/core/deps.py

from typing import Optional
from fastapi import Header


def get_current_user_id(x_user_id: Optional[str] = Header(default=None)) -> Optional[str]:
    """
    Identity dependency. The upstream identity provider authenticates the caller
    and forwards their id in the `X-User-Id` header. Returns None when the header
    is absent or blank; the service layer turns that into a 401.
    """
    if x_user_id is None or not x_user_id.strip():
        return None
    return x_user_id.strip()
