"""Object storage abstraction for resume documents."""

from __future__ import annotations

from abc import ABC, abstractmethod


class ObjectStore(ABC):
    """Read-only access to stored resume files."""

    @abstractmethod
    def get_bytes(self, bucket: str, key: str) -> bytes:
        """Fetch an object's content.

        Raises:
            NotFoundError: If the key does not exist.
        """
        pass

    @abstractmethod
    def get_read_url(self, bucket: str, key: str, ttl_seconds: int) -> str:
        """Mint a time-limited, credential-free read URL for an object."""
        pass
