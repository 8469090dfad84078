"""Configuration package for the Alpha Vantage client."""

from .settings import ClientSettings, get_settings

__all__ = ["ClientSettings", "get_settings"]
