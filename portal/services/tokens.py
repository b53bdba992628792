"""Generation of opaque client identifiers and secrets."""

from authlib.common.security import generate_token


class SecretGenerator(object):
    """Generates random, URL-safe tokens of a fixed length."""

    def __init__(self, length: int = 48) -> None:
        self.length = length

    def generate(self) -> str:
        token: str = generate_token(self.length)
        return token
