import bcrypt

from civicgate.domain.result import Error, Result, Return

MIN_PASSWORD_LENGTH = 8


def hash_password(password: str) -> str:
    """bcrypt hash with cost factor 12"""
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt(12)).decode()


def verify_password(password: str, password_hash: str | None) -> bool:
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode(), password_hash.encode())
    except ValueError:
        return False


def validate_password(password: str) -> Result[None]:
    if len(password) < MIN_PASSWORD_LENGTH:
        return Return.err(
            Error(
                "INVALID_PASSWORD",
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
            )
        )
    return Return.ok(None)


def burn_password_check() -> None:
    """Spend one bcrypt round so unknown accounts answer as slowly as known ones."""
    bcrypt.checkpw(b"dummy_password", bcrypt.gensalt(12))
