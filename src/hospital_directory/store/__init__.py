"""
Store Package - Accepted Records and Derived Indexes.
"""

from hospital_directory.store.directory_store import (
    DirectoryBuilder,
    DirectoryStore,
    StoreHolder,
)

__all__ = ["DirectoryBuilder", "DirectoryStore", "StoreHolder"]
