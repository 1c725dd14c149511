"""
Solara - solar geometry engine for motorized panel and window tracking
"""

__version__ = "1.0.0"
