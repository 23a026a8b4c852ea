# storefront/utils/security.py
from datetime import datetime, timedelta, timezone

import bcrypt
from jose import jwt

from storefront.utils.settings import JWT_ALGORITHM, JWT_EXPIRES_MINUTES, JWT_SECRET

BCRYPT_ROUNDS = 10
# bcrypt bierze pod uwage tylko pierwsze 72 bajty hasla
BCRYPT_MAX_BYTES = 72


def _jwt_secret() -> str:
    if not JWT_SECRET:
        raise RuntimeError("Missing JWT_SECRET environment variable")
    return JWT_SECRET


def sign_access_token(payload: dict, expires_minutes: int | None = None) -> str:
    now = datetime.now(timezone.utc)
    claims = dict(payload)
    claims["iat"] = now
    claims["exp"] = now + timedelta(minutes=expires_minutes or JWT_EXPIRES_MINUTES)
    return jwt.encode(claims, _jwt_secret(), algorithm=JWT_ALGORITHM)


def verify_access_token(token: str) -> dict:
    """Zwraca claims tokenu albo rzuca JWTError (zly podpis, wygasl)."""
    return jwt.decode(token, _jwt_secret(), algorithms=[JWT_ALGORITHM])


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    return bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    #hashe $2a$/$2b$ z istniejacej bazy tez przechodza
    try:
        return bcrypt.checkpw(_password_bytes(password), password_hash.encode("utf-8"))
    except ValueError:
        return False


__all__ = [
    "sign_access_token",
    "verify_access_token",
    "hash_password",
    "verify_password",
]
