"""Salted, slow one-way password hashing."""

import bcrypt

MIN_BCRYPT_ROUNDS = 10


class BcryptPasswordHasher:
    """bcrypt implementation used by every UserStore backend."""

    def __init__(self, rounds: int = MIN_BCRYPT_ROUNDS) -> None:
        if rounds < MIN_BCRYPT_ROUNDS:
            raise ValueError(f"bcrypt cost factor must be at least {MIN_BCRYPT_ROUNDS}")
        self._rounds = rounds

    def hash_password(self, plain_password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(plain_password.encode("utf-8"), salt).decode("utf-8")

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        try:
            return bcrypt.checkpw(
                plain_password.encode("utf-8"), hashed_password.encode("utf-8")
            )
        except ValueError:
            # Malformed stored hash.
            return False
