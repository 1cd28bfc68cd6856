"""Reader for Avro binary-encoded primitive values."""

__version__ = "0.1.0"
__all__ = ["reader"]