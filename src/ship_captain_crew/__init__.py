"""
Ship, Captain & Crew.

Multi-round dice game engine with session hosting and settings.
"""

__version__ = "0.1.0"
