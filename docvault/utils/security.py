
from dataclasses import dataclass
from passlib.context import CryptContext
from datetime import datetime, timedelta, timezone
from jose import jwt, JWTError
from docvault.config import settings
from docvault.errors import ConfigurationError, InvalidTokenError

ALGORITHM = "HS256"
TOKEN_TTL = timedelta(hours=1)

pwd_context = CryptContext(schemes=["bcrypt_sha256", "bcrypt"], deprecated="auto")


@dataclass(frozen=True)
class TokenPayload:
    user_id: int
    issued_at: datetime
    expires_at: datetime


def hash_password(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(password: str, hashed: str) -> bool:
    return pwd_context.verify(password, hashed)

def dummy_verify() -> None:
    """Burn one verification's worth of time when there is no hash to check against."""
    pwd_context.dummy_verify()


def _secret() -> str:
    if not settings.jwt_secret:
        raise ConfigurationError("JWT_SECRET is not set")
    return settings.jwt_secret

def require_secret() -> None:
    _secret()


def issue_token(user_id: int, now: datetime | None = None) -> str:
    issued = now or datetime.now(timezone.utc)
    expire = issued + TOKEN_TTL
    to_encode = {
        "sub": str(user_id),
        "userId": user_id,
        "iat": int(issued.timestamp()),
        "exp": int(expire.timestamp()),
    }
    return jwt.encode(to_encode, _secret(), algorithm=ALGORITHM)

def verify_token(token: str, now: datetime | None = None) -> TokenPayload:
    """Decode a token or raise InvalidTokenError; there is no partial result."""
    secret = _secret()
    try:
        # expiry is checked below against ``now``
        payload = jwt.decode(token, secret, algorithms=[ALGORITHM], options={"verify_exp": False})
    except JWTError:
        raise InvalidTokenError()

    user_id, iat, exp = payload.get("userId"), payload.get("iat"), payload.get("exp")
    if not all(isinstance(v, int) and not isinstance(v, bool) for v in (user_id, iat, exp)):
        raise InvalidTokenError()

    current = (now or datetime.now(timezone.utc)).timestamp()
    if current >= exp:
        raise InvalidTokenError()

    return TokenPayload(
        user_id=user_id,
        issued_at=datetime.fromtimestamp(iat, tz=timezone.utc),
        expires_at=datetime.fromtimestamp(exp, tz=timezone.utc),
    )
