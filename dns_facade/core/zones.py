"""
Zone directory interface.
"""

from abc import ABC, abstractmethod
from typing import Iterator

from .model import Zone


class ZoneApi(ABC):
    """Enumerates the zones a backend knows about.

    Each call to ``__iter__`` starts a fresh listing, which may page through
    the backend lazily. Order is only guaranteed stable within one listing.
    """

    @abstractmethod
    def __iter__(self) -> Iterator[Zone]:
        """Iterate over all zones currently present in the backend."""
        pass
