"""Identity Workflow - authenticate-or-register and bearer token verification.

Invariants:
    - Unknown username: the account is created with a bcrypt hash and the
      starting grant in ONE insert, then a token is issued
    - Known username: token only if the password matches, else InvalidPasswordError
    - Losing a registration race to a concurrent request for the same username
      falls back to verifying against the row that won
    - bcrypt runs in a worker thread; the event loop never blocks on hashing
"""

import asyncio
import logging

from coinshop.core.domain_types import AccountSnapshot, DEFAULT_STARTING_COINS
from coinshop.core.errors import (
    DatabaseError, InvalidPasswordError, InvalidTokenError, MissingTokenError,
)
from coinshop.core.repository_protocols import AccountStore, Transactional
from coinshop.infrastructure.security import (
    TokenCodec, hash_password, verify_password,
)
from coinshop.services.atomic_unit import atomic

logger = logging.getLogger(__name__)

BEARER_SCHEME = "bearer"


class IdentityService:
    """Issues tokens, registering unknown usernames on first login."""

    def __init__(
        self, accounts: AccountStore, tx: Transactional, codec: TokenCodec,
        starting_coins: int = DEFAULT_STARTING_COINS,
    ):
        self.accounts = accounts
        self.tx = tx
        self.codec = codec
        self.starting_coins = starting_coins

    async def authenticate(self, username: str, password: str) -> str:
        """Return a token for username, creating the account if it is new."""
        logger.debug("authenticate", extra={"username": username})
        account = await self.accounts.get_by_username(username)
        if account is None:
            await self._register(username, password)
        elif not await _password_matches(password, account):
            logger.warning("Invalid password", extra={"username": username})
            raise InvalidPasswordError()
        return self.codec.issue(username)

    def verify_token(self, token: str) -> str:
        """Username the token was issued for; InvalidTokenError otherwise."""
        return self.codec.verify(token)

    async def _register(self, username: str, password: str) -> AccountSnapshot:
        password_hash = await asyncio.to_thread(hash_password, password)
        try:
            async with atomic(self.tx, "register"):
                account = await self.accounts.create(
                    username, password_hash, self.starting_coins,
                )
        except DatabaseError:
            existing = await self.accounts.get_by_username(username)
            if existing is None:
                raise
            logger.info(
                "Registration lost a race; verifying against existing account",
                extra={"username": username},
            )
            if not await _password_matches(password, existing):
                raise InvalidPasswordError()
            return existing
        logger.info(
            f"Registered account with {self.starting_coins} coins",
            extra={"username": username, "amount": self.starting_coins},
        )
        return account


async def _password_matches(password: str, account: AccountSnapshot) -> bool:
    return await asyncio.to_thread(
        verify_password, password, account.password_hash,
    )


def verify_bearer_token(authorization: str | None, codec: TokenCodec) -> str:
    """Resolve an Authorization header value to a username."""
    if not authorization or not authorization.strip():
        raise MissingTokenError()
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != BEARER_SCHEME:
        raise InvalidTokenError("expected a Bearer token")
    token = token.strip()
    if not token:
        raise MissingTokenError()
    return codec.verify(token)
