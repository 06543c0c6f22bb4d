"""Core functionality for the product showcase kiosk."""

__all__ = ["logger", "models", "cache", "api_keys"]
