"""
Top-level package for the wildlife observation dashboard.

This package exposes the core architecture (domain, views, UI adapters).
Most code should import from submodules such as:
    wildlife_dashboard.core
    wildlife_dashboard.views
    wildlife_dashboard.ui
"""

__all__: list[str] = []
