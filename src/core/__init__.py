"""Core configuration, errors, logging and constants."""
