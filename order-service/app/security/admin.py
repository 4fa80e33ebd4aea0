"""
Admin Authorization

Admin discounts are only honored for operators presenting the configured
admin key in the X-Admin-Key header.
"""

import hmac
import logging
from typing import Optional

from fastapi import Header, HTTPException

from ..core.config import get_settings

logger = logging.getLogger(__name__)


class AdminDependency:
    """
    FastAPI dependency resolving whether the caller is an operator.

    Returns True for a valid admin key, False when no key was sent.
    A wrong key is always rejected.
    """

    def __init__(self, require_admin: bool = False):
        """
        Args:
            require_admin: If True, reject requests without a valid admin key
        """
        self.require_admin = require_admin

    async def __call__(self, x_admin_key: Optional[str] = Header(None)) -> bool:
        settings = get_settings()

        if not x_admin_key:
            if self.require_admin:
                raise HTTPException(
                    status_code=401,
                    detail="This endpoint requires an admin key",
                )
            return False

        if not settings.admin_api_key or not hmac.compare_digest(
            x_admin_key, settings.admin_api_key
        ):
            logger.warning("Rejected request with invalid admin key")
            raise HTTPException(status_code=403, detail="Invalid admin key")

        return True


# Dependency instances
require_admin = AdminDependency(require_admin=True)
optional_admin = AdminDependency(require_admin=False)
