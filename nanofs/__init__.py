"""
In-memory filesystem driven by a line-oriented command shell.
"""

__version__ = "0.1.0"
