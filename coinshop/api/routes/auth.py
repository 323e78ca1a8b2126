"""Auth Route - POST /api/auth: log in, registering unknown usernames.

Invariants:
    - 200 {token} on success, 401 on wrong password, 400 on malformed body
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from coinshop.api.dependencies import get_identity_service
from coinshop.schemas.auth import AuthRequest, AuthResponse
from coinshop.services.identity import IdentityService

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/auth", response_model=AuthResponse)
async def authenticate(
    body: AuthRequest,
    identity: Annotated[IdentityService, Depends(get_identity_service)],
):
    token = await identity.authenticate(body.username, body.password)
    return AuthResponse(token=token)
