# Standard library imports
import time
from typing import Any, Dict

# External package imports
import jwt
import bcrypt
from jwt.exceptions import InvalidTokenError

# Local application imports
from .config import get_settings

BCRYPT_ROUNDS = 12
# bcrypt only reads this many bytes of input; newer releases reject longer passwords
MAX_PASSWORD_BYTES = 72


def hash_password(plain_password: str) -> str:
    """Salted bcrypt hash of a raw password, as stored on the user document"""
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(plain_password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Check a raw password against a stored bcrypt hash.

    bcrypt.checkpw compares digests in constant time.

    Returns:
        True on a match; False on a mismatch, a missing hash or a malformed hash
    """
    if not hashed_password:
        return False
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            hashed_password.encode("utf-8")
        )
    except ValueError:
        # Malformed stored hash
        return False


def create_jwt_token(payload: Dict[str, Any]) -> str:
    """
    Sign a JWT with the configured secret, adding iat and exp claims

    Args:
        payload: Claims to sign (e.g. sub, email)
    """
    settings = get_settings()
    issued_at = int(time.time())

    token_payload = {
        **payload,
        "iat": issued_at,
        "exp": issued_at + settings.access_token_expire_minutes * 60,
    }
    return jwt.encode(token_payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def create_access_token(user_id: str, email: str) -> str:
    """Bearer token for a signed-in user; the subject claim is the user ID"""
    return create_jwt_token({"sub": user_id, "email": email})


def decode_jwt_token(token: str) -> Dict[str, Any]:
    """
    Verify signature and expiry of a JWT and return its claims

    Raises:
        ValueError: If the token is malformed, tampered with or expired
    """
    settings = get_settings()
    try:
        return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except InvalidTokenError as e:
        raise ValueError(f"Invalid token: {str(e)}")
