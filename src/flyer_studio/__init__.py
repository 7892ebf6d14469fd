"""Flyer Studio: HTML design templates filled from prompts and themed with brand kits."""

__version__ = "0.1.0"
