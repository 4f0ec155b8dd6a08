"""Reference cohort stores."""

from cv_refiner.references.store import (
    InMemoryReferenceStore,
    JsonReferenceStore,
    ReferenceStore,
    filter_references,
)

__all__ = [
    "InMemoryReferenceStore",
    "JsonReferenceStore",
    "ReferenceStore",
    "filter_references",
]
