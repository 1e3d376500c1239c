from .configuration import InMemoryConfiguration

__all__ = [
    "InMemoryConfiguration",
]
