"""Random string capability used for booking identifiers."""

import secrets
import string
from typing import Protocol

ALPHANUMERIC = string.ascii_letters + string.digits
SPECIAL_CHARACTERS = "!@#$%^&*()"


class RandomSource(Protocol):
    """Anything able to produce random strings of a given length."""

    def random_string(self, length: int, alphanumeric_only: bool = True) -> str:
        ...


class SecretsRandomSource:
    """Random strings drawn from the ``secrets`` module."""

    def random_string(self, length: int, alphanumeric_only: bool = True) -> str:
        """Generate a random string.

        Args:
            length: Number of characters to generate
            alphanumeric_only: Restrict output to ASCII letters and digits

        Returns:
            Random string of exactly ``length`` characters
        """
        alphabet = ALPHANUMERIC if alphanumeric_only else ALPHANUMERIC + SPECIAL_CHARACTERS
        return "".join(secrets.choice(alphabet) for _ in range(length))
