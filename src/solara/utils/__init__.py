"""
Utility modules for Solara
"""

from .solar import SolarCalculator, PanelAnalyzer

__all__ = [
    "SolarCalculator",
    "PanelAnalyzer",
]
