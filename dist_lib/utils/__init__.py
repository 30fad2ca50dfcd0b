"""
Utility functions for the distribution library.

This module provides the search primitives shared by the sampling code.
"""

from dist_lib.utils.search import binary_search, binary_search_array

__all__ = [
    'binary_search',
    'binary_search_array'
]
