"""Password Hashing - bcrypt with a configurable work factor.

Invariants:
    - Plain passwords never leave this module; only the bcrypt hash is stored
    - Empty passwords are refused before hashing
"""

import bcrypt


def hash_password(plain_password: str, rounds: int = 12) -> str:
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise ValueError("Password is empty")
    return bcrypt.hashpw(password, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    password = (plain_password or "").encode("utf-8")
    hashed = (password_hash or "").encode("utf-8")
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(password, hashed)
    except ValueError:
        return False
