"""Configuration package for Dwell backend."""

from .base import BaseSettings
from .database import DatabaseConfig

__all__ = ["BaseSettings", "DatabaseConfig"]
