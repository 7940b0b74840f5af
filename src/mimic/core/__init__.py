"""Core types, models and configuration."""

from mimic.core.config import Settings, settings
from mimic.core.models import CacheInfo
from mimic.core.types import Collection, Count, ElementCallback, Index

__all__ = [
    "Settings",
    "settings",
    "CacheInfo",
    "Collection",
    "Count",
    "ElementCallback",
    "Index",
]
