"""
Distribution module for the distribution library.

This module provides the ordered discrete distribution used to model skewed
outcome frequencies, together with constructors for its canonical shapes.
"""

from dist_lib.distribution.discrete import Distribution

__all__ = [
    'Distribution'
]
