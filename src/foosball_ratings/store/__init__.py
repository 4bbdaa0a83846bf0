"""Rating store module.

Provides persistence for player ratings:
- InMemoryRatingStore: Dict-backed store
- JsonFileRatingStore: JSON file on disk
"""

from .base import DEFAULT_RATING, BaseRatingStore
from .json_file import JsonFileRatingStore
from .memory import InMemoryRatingStore


def get_store(name: str, **kwargs) -> BaseRatingStore:
    """Factory function to get a rating store by name.

    Args:
        name: Store name. One of:
            - "json": JSON file store (requires ``path``)
            - "memory": In-memory store
        **kwargs: Additional arguments passed to the store constructor.

    Raises:
        ValueError: If the store name is not recognized.
    """
    stores = {
        "json": JsonFileRatingStore,
        "memory": InMemoryRatingStore,
    }

    if name not in stores:
        valid = list(stores.keys())
        raise ValueError(f"Unknown store '{name}'. Valid stores: {valid}")

    return stores[name](**kwargs)


__all__ = [
    "DEFAULT_RATING",
    "BaseRatingStore",
    "InMemoryRatingStore",
    "JsonFileRatingStore",
    "get_store",
]
