"""TCP service answering framed JSON API requests, with an AMQP publisher."""

__version__ = "0.1.0"
__all__ = ["__version__"]