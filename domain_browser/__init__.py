"""
Top-level package for the data domain browser.

This package exposes the core architecture (catalog engine, config, UI adapter).
Most code should import from submodules such as:
    domain_browser.core
    domain_browser.config
    domain_browser.ui
"""

__all__: list[str] = []
