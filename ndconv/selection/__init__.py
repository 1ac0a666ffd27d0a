"""
Directory contains helpers to get the position of the smallest values of an array.
"""

from ndconv.selection.argmin import argmin
