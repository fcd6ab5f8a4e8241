"""
Shared helpers for toolhub components.
"""
