"""
toolhub: an in-memory catalog of tools served over HTTP.
"""

__version__ = "1.0.0"
