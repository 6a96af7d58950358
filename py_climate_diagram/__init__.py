"""Walter-Lieth climate diagram geometry."""

__version__ = "0.1.0"
