"""mqstat: IBM MQ statistics and accounting (PCF) message decoder."""

__version__ = "0.1.0"

__all__ = ["__version__"]
