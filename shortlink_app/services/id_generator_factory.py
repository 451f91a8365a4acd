"""
Factory for creating link id generators.
Uses caching to avoid creating multiple instances.
"""

from enum import Enum
from shortlink_app.services.id_generators import (
    IdGenerator,
    RandomBase64IdGenerator,
    SecureTokenIdGenerator
)
from shortlink_app.config import settings


class IdGeneratorType(Enum):
    """Available link id generators"""
    RANDOM_BASE64 = "random_base64"
    TOKEN = "token"


class IdGeneratorFactory:
    """Factory for creating link id generators with caching"""

    _instances = {}  # Cache for generator instances

    @classmethod
    def create_generator(
        cls,
        generator_type: IdGeneratorType = None
    ) -> IdGenerator:
        """
        Create or return cached id generator.

        Args:
            generator_type: Type of generator to create.
                            If None, uses value from settings.

        Returns:
            A cached instance of an IdGenerator

        Raises:
            ValueError: If generator_type is unknown
        """
        if generator_type is None:
            generator_type = IdGeneratorType(settings.id_generator)

        if generator_type in cls._instances:
            return cls._instances[generator_type]

        if generator_type == IdGeneratorType.RANDOM_BASE64:
            instance = RandomBase64IdGenerator()
        elif generator_type == IdGeneratorType.TOKEN:
            instance = SecureTokenIdGenerator(nbytes=settings.id_token_bytes)
        else:
            raise ValueError(f"Unknown id generator: {generator_type}")

        cls._instances[generator_type] = instance
        return instance

    @classmethod
    def clear_instances(cls):
        """Clear cached instances (for testing)"""
        cls._instances.clear()
