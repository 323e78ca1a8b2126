"""Security - bcrypt password hashing and HS256 JWT issue/verify.

Invariants:
    - Plain passwords are never stored or logged; only bcrypt hashes leave this module
    - Tokens carry the username in "sub" plus "iat"/"exp"; expired or tampered
      tokens raise InvalidTokenError, never a library exception
"""

from datetime import datetime, timedelta, timezone

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from coinshop.core.errors import InvalidTokenError

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time comparison; malformed hashes count as a mismatch."""
    try:
        return pwd_context.verify(password, password_hash)
    except (ValueError, TypeError):
        return False


class TokenCodec:
    """Signs and verifies access tokens with a shared secret."""

    def __init__(
        self, secret_key: str, algorithm: str = "HS256",
        expire_minutes: int = 24 * 60,
    ):
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire = timedelta(minutes=expire_minutes)

    def issue(self, username: str, now: datetime | None = None) -> str:
        issued_at = now or datetime.now(timezone.utc)
        claims = {
            "sub": username,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self._expire).timestamp()),
        }
        return jwt.encode(claims, self._secret_key, algorithm=self._algorithm)

    def verify(self, token: str) -> str:
        """Return the username the token was issued for."""
        try:
            claims = jwt.decode(
                token, self._secret_key, algorithms=[self._algorithm],
            )
        except ExpiredSignatureError:
            raise InvalidTokenError("token has expired")
        except JWTError:
            raise InvalidTokenError("token is invalid")
        username = claims.get("sub")
        if not isinstance(username, str) or not username:
            raise InvalidTokenError("token has no username")
        return username
