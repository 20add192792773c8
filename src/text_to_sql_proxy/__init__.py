"""Configuration loading for the text-to-SQL proxy service."""

__version__ = "0.1.0"
