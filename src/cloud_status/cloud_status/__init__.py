# ABOUTME: Cloud status package initialization
# ABOUTME: Provides the debounced connection indicator and its supporting layers

"""
Cloud connection status package.

This package decides what a user interface should display for a live
connection-status signal, hiding short reconnect blips while surfacing
recovery immediately. It follows the same layering as the rest of the
codebase: models, interfaces, implementations and components.
"""

__version__ = "0.1.0"
