"""
Situational map layer engine.
Composes analytical outputs into ordered pydeck layers and manages the
map surface lifecycle.
"""

__version__ = "0.1.0"
