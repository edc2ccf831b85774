"""
Pastoral Admin Backend — Admin Key Guard
==========================================

What:  Dependency attached to every /api/admin router.
How:   When ADMIN_API_KEY is configured, the X-Admin-Key header must match
       it (constant-time comparison) or the request fails with 401.
       With no key configured the guard lets everything through; the
       lifespan logs a warning about it at startup.
"""

import hmac
from typing import Optional

from fastapi import Header, Request

from pastoral_admin.exceptions import UnauthorizedError

ADMIN_KEY_HEADER = "X-Admin-Key"


async def require_admin_key(
    request: Request,
    x_admin_key: Optional[str] = Header(default=None, alias=ADMIN_KEY_HEADER),
) -> None:
    expected = request.app.state.settings.admin_api_key
    if not expected:
        return
    if x_admin_key is None or not hmac.compare_digest(x_admin_key.encode(), expected.encode()):
        raise UnauthorizedError(context={"path": request.url.path})
