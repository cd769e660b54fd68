"""
Account endpoints for API v1.

Provide registration, sign in and a lookup of the signed-in account.
Validation failures are returned with their user-safe message; the
token is obtained from ``/signin`` and sent as a Bearer header.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status

from event_finder_api.app.core.errors import AccountError
from event_finder_api.app.core.security import get_current_account
from event_finder_api.app.schemas.account import (
    AccountCreate,
    AccountRead,
    AccountSignIn,
    MessageResponse,
    TokenResponse,
)
from event_finder_api.app.services.account_service import AccountService


router = APIRouter()


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def register(data: AccountCreate) -> MessageResponse:
    """Register a new account from ``username``, ``email`` and ``password``."""
    try:
        await AccountService.register(data)
    except AccountError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    return MessageResponse(message="Account created successfully.")


@router.post("/signin", response_model=TokenResponse)
async def sign_in(data: AccountSignIn) -> TokenResponse:
    """Exchange an e‑mail and password for an access token."""
    try:
        token = await AccountService.sign_in(data)
    except AccountError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    return TokenResponse(message="Sign in successful.", token=token)


@router.get("/me", response_model=AccountRead)
async def read_current_account(
    current_account: Dict[str, Any] = Depends(get_current_account),
) -> AccountRead:
    """Return the account the Bearer token belongs to."""
    return AccountRead(**current_account)
