"""Small networking exercises: routing, traffic shaping and socket programs."""

__version__ = "0.1.0"
__all__ = ["dvr", "leaky_bucket", "ftp", "stopwait", "tcpchat", "udpchat"]