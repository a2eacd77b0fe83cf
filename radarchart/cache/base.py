"""Base cache interface for rendered images

Defines the abstract interface that image cache implementations follow.
"""

from abc import ABC, abstractmethod
from typing import Optional


class ImageCacheBase(ABC):
    """Abstract base class for rendered-image caches keyed by raw query string"""

    @abstractmethod
    def get(self, key: str) -> Optional[bytes]:
        """
        Look up a cached image

        Args:
            key: Raw query string exactly as received

        Returns:
            Image bytes, or None if absent or expired
        """
        pass

    @abstractmethod
    def set(self, key: str, value: bytes) -> None:
        """
        Store an image under the default expiration

        Args:
            key: Raw query string exactly as received
            value: Rendered image bytes
        """
        pass

    @abstractmethod
    def purge_expired(self) -> int:
        """
        Remove expired entries

        Returns:
            Number of entries removed
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every entry"""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    def start(self) -> None:
        """Start background maintenance, if the implementation has any"""

    def stop(self) -> None:
        """Stop background maintenance, if the implementation has any"""
