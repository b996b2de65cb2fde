"""Configuration, logging, i18n, validation, error-code and container utilities for service applications."""

__version__ = "0.1.0"