"""Address canonicalization and matching engine for field-service routes."""

__version__ = "1.0.0"
