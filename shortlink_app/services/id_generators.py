"""
Link id generators for the shortener.
Uses Strategy Pattern so the id scheme can change without touching callers.
"""

import base64
import random
import secrets
from abc import ABC, abstractmethod


class IdGenerator(ABC):
    """Abstract base class for link id generators"""

    @abstractmethod
    def generate(self) -> str:
        """
        Generate a new link id.

        Returns:
            A short, URL-safe, printable token. Uniqueness is not checked.
        """
        pass


class RandomBase64IdGenerator(IdGenerator):
    """
    Random 32-bit number, written in decimal, then URL-safe base64 encoded.

    Pros: Short, URL-safe, no DB queries
    Cons: ~4 billion possible ids, collisions are possible and not checked
    """

    UPPER_BOUND = 2 ** 32 - 1

    def __init__(self, rng: random.Random = None):
        self.rng = rng or random.Random()

    def generate(self) -> str:
        """Draw a number in [0, 2**32 - 1) and encode its decimal digits"""
        number = self.rng.randrange(self.UPPER_BOUND)
        return self.encode(number)

    @staticmethod
    def encode(number: int) -> str:
        """
        Encode a number's base-10 representation as unpadded URL-safe base64.

        Example: 42 -> "42" -> "NDI"
        """
        encoded = base64.urlsafe_b64encode(str(number).encode("ascii"))
        return encoded.rstrip(b"=").decode("ascii")


class SecureTokenIdGenerator(IdGenerator):
    """
    Token from the OS CSPRNG (secrets.token_urlsafe).

    Pros: Unpredictable, larger id space
    Cons: Longer ids for the same collision risk budget
    """

    def __init__(self, nbytes: int = 8):
        self.nbytes = nbytes

    def generate(self) -> str:
        return secrets.token_urlsafe(self.nbytes)
