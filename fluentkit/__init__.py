"""Toolkit-independent building blocks for Fluent-style user interfaces."""

__version__ = "1.0.0"

__all__ = [
    "observable",
    "color",
    "tools",
    "colors",
    "textstyle",
    "theme",
    "captcha",
    "rectangle",
    "watermark",
    "table_model",
    "sort_proxy",
    "tree_model",
]