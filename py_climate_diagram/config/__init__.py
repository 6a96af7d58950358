"""
Configuration modules for diagram generation.

Application settings are read from the environment only when
config.config is imported (the API does this); the core library needs
just DiagramSettings.
"""

from .diagram_settings import DiagramSettings

__all__ = ['DiagramSettings']
