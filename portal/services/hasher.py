"""One-way password hashing, using :mod:`passlib`."""

from passlib.context import CryptContext


class Hasher(object):
    """Hash and verify passwords."""

    def __init__(self, schemes: str = 'pbkdf2_sha256') -> None:
        """Use the space-delimited passlib ``schemes``; the first hashes."""
        self._context = CryptContext(schemes=schemes.split(),
                                     deprecated='auto')

    def hash(self, secret: str) -> str:
        """Generate a salted hash of ``secret``."""
        digest: str = self._context.hash(secret)
        return digest

    def check(self, digest: str, secret: str) -> bool:
        """Determine whether ``secret`` matches the stored ``digest``."""
        try:
            return bool(self._context.verify(secret, digest))
        except ValueError:   # Malformed or unknown hash.
            return False
