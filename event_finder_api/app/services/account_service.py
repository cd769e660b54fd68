"""
Business logic for accounts.

Registration checks that all fields are present and that neither the
e‑mail nor the username is taken, then stores a salted password hash.
Sign in verifies the password and issues a signed, time-bounded token
whose subject is the account id.
"""

import logging

from ..core.db import find_account, insert_account
from ..core.errors import AccountError
from ..core.security import create_access_token, hash_password, verify_password
from ..schemas.account import AccountCreate, AccountSignIn


logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password."


class AccountService:
    """Registration and sign in against the SQLite credential store."""

    @classmethod
    async def register(cls, data: AccountCreate) -> int:
        """Create an account and return its id.

        Raises ``AccountError`` (400) when a field is missing or the
        e‑mail or username is already registered.
        """
        username = (data.username or "").strip()
        email = (data.email or "").strip()
        if not username or not email or not data.password:
            raise AccountError("Missing registration parameters.")

        logger.info("Checking that %s is not registered yet", email)
        if find_account("email", email) is not None:
            raise AccountError("An account is already registered with this email address.")
        if find_account("username", username) is not None:
            raise AccountError("An account is already registered with this username.")

        account_id = insert_account(username, email, hash_password(data.password))
        logger.info("Registered account %s (%s)", account_id, username)
        return account_id

    @classmethod
    async def sign_in(cls, data: AccountSignIn) -> str:
        """Return a token for valid credentials.

        Unknown e‑mail and wrong password produce the same 401 error so
        callers cannot probe which addresses are registered.
        """
        if not data.email or not data.password:
            raise AccountError(INVALID_CREDENTIALS, status_code=401)
        account = find_account("email", data.email.strip())
        if account is None or not verify_password(data.password, account["password_hash"]):
            logger.info("Rejected sign in for %s", data.email)
            raise AccountError(INVALID_CREDENTIALS, status_code=401)
        logger.info("Account %s signed in", account["id"])
        return create_access_token({"sub": str(account["id"])})
