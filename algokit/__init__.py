"""Classic algorithm and data-structure routines grouped into themed modules."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "dynamic",
    "graphs",
    "hashmap",
    "linked",
    "nested",
    "numbers",
    "search",
    "strings",
    "trees",
]