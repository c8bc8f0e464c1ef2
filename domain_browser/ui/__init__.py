"""
Dash adapter: layout, callbacks and card rendering on top of domain_browser.core.
"""
