"""Data models shared by the functional helpers."""

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .types import Count

__all__ = ["CacheInfo"]


class CacheInfo(BaseModel):
    """Snapshot of the statistics of a single memoize cache.

    Attributes:
        hits: Number of calls answered from the cache.
        misses: Number of calls that invoked the wrapped callback.
        size: Number of argument signatures currently stored.
    """

    model_config = ConfigDict(frozen=True)

    hits: Count = Field(0, description="Calls answered from the cache.")
    misses: Count = Field(0, description="Calls that invoked the callback.")
    size: Count = Field(0, description="Stored argument signatures.")

    @computed_field
    @property
    def hit_ratio(self) -> float:
        """Fraction of calls answered from the cache (0.0 before any call)."""
        calls = self.hits + self.misses
        if calls == 0:
            return 0.0
        return self.hits / calls
