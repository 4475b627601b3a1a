"""Configuration module — exports Settings and CacheType."""

from surveyhost.config.settings import CacheType, Settings

__all__ = ["CacheType", "Settings"]
