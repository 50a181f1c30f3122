"""Project identifier derivation."""

import hashlib

ID_LENGTH = 16


def create_id(canonical_path: str) -> str:
    """Derive a stable project id from a canonical path.

    The path is hashed as given; callers are responsible for resolving it
    first so that equivalent spellings map to the same id.

    Args:
        canonical_path: Absolute, resolved path string

    Returns:
        First 16 hex characters of the SHA256 digest
    """
    return hashlib.sha256(canonical_path.encode("utf-8")).hexdigest()[:ID_LENGTH]
