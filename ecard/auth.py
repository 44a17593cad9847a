"""Identity gate for host-facing endpoints.

Authentication itself happens upstream. The gate only has to turn an incoming request into
the authenticated host id, or nothing.
"""

import logging
from typing import Protocol

from fastapi import Depends, Request

from ecard.config.settings import settings
from ecard.errors import UnauthorizedError

logger = logging.getLogger(__name__)


class IdentityGate(Protocol):
    def resolve(self, request: Request) -> str | None:
        ...


class HeaderIdentityGate:
    """Trusts the header an authenticating proxy sets after verifying the session."""

    def __init__(self, header_name: str) -> None:
        self.header_name = header_name

    def resolve(self, request: Request) -> str | None:
        host_id = request.headers.get(self.header_name, "").strip()
        return host_id or None


def get_identity_gate() -> IdentityGate:
    return HeaderIdentityGate(settings.host_identity_header)


async def get_current_host_id(
    request: Request,
    gate: IdentityGate = Depends(get_identity_gate),
) -> str:
    host_id = gate.resolve(request)
    if host_id is None:
        logger.debug(f"Rejected unauthenticated request to {request.url.path}")
        raise UnauthorizedError()
    return host_id
