from ticketing.auth.identity import Identity
from ticketing.auth.passwords import BcryptPasswordHasher
from ticketing.auth.tokens import TokenCodec

__all__ = ["Identity", "BcryptPasswordHasher", "TokenCodec"]
