from passlib.context import CryptContext
from datetime import datetime, timedelta, timezone
from typing import NamedTuple
import logging
import jwt

from .config import Settings
from .errors import InternalError, InvalidTokenError

logger = logging.getLogger(__name__)

# Use pbkdf2_sha256 to avoid external bcrypt backend issues in some environments
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    try:
        return pwd_context.hash(password)
    except (TypeError, ValueError) as e:
        raise InternalError("password hashing failed") from e


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Constant-time check of a password against a stored digest; malformed digests never match."""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (TypeError, ValueError):
        logger.warning("Password could not be checked against the stored digest")
        return False


def dummy_verify() -> None:
    """Spend the time of one verification when there is no digest to check."""
    pwd_context.dummy_verify()


class TokenIdentity(NamedTuple):
    account_id: int
    email: str


class TokenService:
    """Issues and verifies signed, time-limited bearer tokens."""

    def __init__(self, secret: str, algorithm: str = "HS256", lifetime: timedelta = timedelta(hours=1)):
        self._secret = secret
        self._algorithm = algorithm
        self.lifetime = lifetime

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(settings.JWT_SECRET, settings.JWT_ALGORITHM, settings.token_lifetime)

    def issue(self, account_id: int, email: str) -> str:
        now = datetime.now(timezone.utc)
        payload = {"id": account_id, "email": email, "iat": now, "exp": now + self.lifetime}
        try:
            return jwt.encode(payload, self._secret, algorithm=self._algorithm)
        except (jwt.PyJWTError, NotImplementedError, TypeError) as e:
            raise InternalError("token signing failed") from e

    def verify(self, token: str) -> TokenIdentity:
        """
        Decode a token back to the identity it was issued for.

        Raises:
            InvalidTokenError: For any malformed, tampered or expired token
        """
        try:
            data = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.PyJWTError as e:
            raise InvalidTokenError(str(e)) from e

        account_id = data.get("id")
        email = data.get("email")
        if not isinstance(account_id, int) or not isinstance(email, str):
            raise InvalidTokenError("token is missing identity claims")
        return TokenIdentity(account_id=account_id, email=email)
