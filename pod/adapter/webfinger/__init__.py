"""WebFinger profile fetching adapter."""

from .client import MockProfileFetcher, WebfingerProfileFetcher

__all__ = ["WebfingerProfileFetcher", "MockProfileFetcher"]
