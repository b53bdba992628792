"""Integrations with external capabilities: storage, hashing, secrets."""

from .hasher import Hasher
from .tokens import SecretGenerator
