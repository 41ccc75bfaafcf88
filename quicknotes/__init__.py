"""
quicknotes

A terminal tool for keeping named collections of one-line notes in plain
text files.
"""

__version__ = "0.1.0"
