"""
Input helpers for the nanofs shell.
"""
