"""
Fade System Package

Automatic complementary brightness fade for two LED channels.
"""

from .fade_engine import FadeEngine, FadeDirection, create_fade_tick

__all__ = [
    "FadeEngine",
    "FadeDirection",
    "create_fade_tick"
]
