# app/utils/security.py
import hashlib
import hmac
import secrets
from datetime import datetime, timedelta, timezone

import jwt

from app.utils.settings import JWT_SECRET, JWT_ALGORITHM, JWT_EXPIRE_MINUTES

_PBKDF2_ITERATIONS = 260_000


def hash_password(password: str) -> str:
    """PBKDF2-SHA256 z losowa sola, format: pbkdf2_sha256$iteracje$sol$hash."""
    salt = secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac(
        "sha256", password.encode(), salt.encode(), _PBKDF2_ITERATIONS
    ).hex()
    return f"pbkdf2_sha256${_PBKDF2_ITERATIONS}${salt}${digest}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        algorithm, iterations, salt, digest = hashed_password.split("$")
    except ValueError:
        return False
    if algorithm != "pbkdf2_sha256":
        return False
    candidate = hashlib.pbkdf2_hmac(
        "sha256", plain_password.encode(), salt.encode(), int(iterations)
    ).hex()
    return hmac.compare_digest(candidate, digest)


def create_access_token(user_id: int, expires_minutes: int | None = None) -> str:
    expire = datetime.now(timezone.utc) + timedelta(
        minutes=expires_minutes if expires_minutes is not None else JWT_EXPIRE_MINUTES
    )
    # sub musi byc stringiem (RFC 7519), PyJWT to sprawdza
    payload = {"sub": str(user_id), "exp": expire}
    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALGORITHM)


def decode_access_token(token: str) -> int:
    """Zwraca id usera z tokena. Rzuca jwt.PyJWTError dla zlego/wygaslego tokena."""
    payload = jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])
    sub = payload.get("sub")
    if sub is None:
        raise jwt.InvalidTokenError("Missing subject")
    try:
        return int(sub)
    except ValueError as e:
        raise jwt.InvalidTokenError("Invalid subject") from e
