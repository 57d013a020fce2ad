"""Classic data structures and algorithms with small TCP services."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "bits",
    "linked_list",
    "lru_cache",
    "net",
    "queues",
    "search",
    "strings",
]