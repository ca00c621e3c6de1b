"""Acting staff identity for API endpoints."""

from typing import Annotated

from fastapi import Cookie, Depends, Header

from ungdoms.core.config import Settings, get_settings


async def get_acting_staff_id(
    settings: Annotated[Settings, Depends(get_settings)],
    dev_token_cookie: Annotated[str | None, Cookie(alias="devToken")] = None,
    dev_token_header: Annotated[str | None, Header(alias="X-Dev-Token")] = None,
) -> str:
    """
    Resolve the staff member acting on this request.

    The dev token is taken as the staff id as-is; no credential is
    validated in this service.

    Returns:
        Staff id from the ``devToken`` cookie, else the ``X-Dev-Token``
        header, else ``DEV_DEFAULT_STAFF_ID``
    """
    return dev_token_cookie or dev_token_header or settings.DEV_DEFAULT_STAFF_ID
