"""
Ordered discrete probability distributions.
"""

import math
import random
from typing import Any, Callable, List, Optional, Sequence

import numpy as np

from dist_lib.logging import log_construction, log_empiric
from dist_lib.utils.search import binary_search_array


class Distribution:
    """
    An immutable, ordered discrete probability distribution.

    Outcomes are numbered 1..width and their probabilities are non-increasing,
    so outcome 1 is always the most likely one. Sampling maps a uniform draw
    through the cumulative distribution (inverse-CDF) with a binary search.

    The random source is injectable: any object with a ``random()`` method
    returning floats in [0, 1) works, e.g. ``random.Random`` or
    ``numpy.random.Generator``. By default the global ``random`` module is used.
    """

    def __init__(self, probabilities: Sequence[float], rng: Optional[Any] = None):
        """
        Initialize the distribution and check its invariants.

        Args:
            probabilities: Outcome probabilities, sorted non-increasing
            rng: Optional uniform random source

        Raises:
            ValueError: If the probabilities are empty, not sorted, negative
                or do not sum to 1 (all within the width-scaled precision)
        """
        values = np.array(probabilities, dtype=float)
        if values.ndim != 1:
            raise ValueError("Probabilities must be a one-dimensional sequence")
        if values.size == 0:
            raise ValueError("Distribution requires at least one outcome")
        if not np.all(np.isfinite(values)):
            raise ValueError("Probabilities must be finite")

        width = values.size
        # tolerance for accumulated rounding error, grows with the width
        precision = width / 1_000_000

        rising = np.flatnonzero(np.diff(values) > precision)
        if rising.size:
            i = rising[0]
            raise ValueError(
                f"Probabilities must be non-increasing: p[{i}]={values[i]} < p[{i + 1}]={values[i + 1]}"
            )
        if values[-1] < -precision:
            raise ValueError(f"Probabilities must be non-negative, got {values[-1]}")

        aggregated = np.cumsum(values)
        if abs(aggregated[-1] - 1) > precision:
            raise ValueError(f"Probabilities must sum to 1, got {aggregated[-1]}")

        values.flags.writeable = False
        aggregated.flags.writeable = False

        self._probabilities = values
        self._aggregated = aggregated
        self._width = width
        self._precision = precision
        self._rng = rng if rng is not None else random

    @property
    def probabilities(self) -> np.ndarray:
        """Read-only array of outcome probabilities."""
        return self._probabilities

    @property
    def aggregated(self) -> np.ndarray:
        """Read-only cumulative distribution."""
        return self._aggregated

    @property
    def width(self) -> int:
        """Number of possible outcomes."""
        return self._width

    @property
    def precision(self) -> float:
        """Tolerance used when checking the invariants."""
        return self._precision

    def __len__(self) -> int:
        return self._width

    def get(self, index: int) -> float:
        """
        Return the probability of an outcome.

        Args:
            index: 1-based outcome index

        Returns:
            Probability of the outcome

        Raises:
            IndexError: If index is not in [1, width]
        """
        if not 1 <= index <= self._width:
            raise IndexError(f"Outcome {index} out of range [1, {self._width}]")
        return float(self._probabilities[index - 1])

    def sample(self, x: Optional[float] = None) -> int:
        """
        Return an outcome of this distribution.

        Without an argument a random outcome is drawn. With x in [0, 1] the
        outcome is computed deterministically as the smallest outcome whose
        cumulative probability reaches x.

        Args:
            x: Optional position in the cumulative distribution

        Returns:
            1-based outcome index

        Raises:
            ValueError: If x is outside [0, 1]
        """
        if x is None:
            # draw in (0, 1]
            x = 1 - self._rng.random()
        elif not 0 <= x <= 1:
            raise ValueError(f"x must be in [0, 1], got {x}")
        return binary_search_array(self._aggregated, x) + 1

    def sample_n(self, n: int) -> List[int]:
        """
        Return n random outcomes of this distribution.

        Args:
            n: Number of samples to generate

        Returns:
            List of n 1-based outcome indices
        """
        return [self.sample() for _ in range(n)]

    def expectation(self, f: Callable[[int], float]) -> float:
        """
        Return the expectation of f(X) where X is the 1-based outcome.

        Args:
            f: Function to apply to each outcome

        Returns:
            Expected value of f(X)
        """
        return float(sum(p * f(i + 1) for i, p in enumerate(self._probabilities)))

    def _frequencies(self, sample_size: int) -> np.ndarray:
        if sample_size < 1:
            raise ValueError(f"Sample size must be positive, got {sample_size}")
        outcomes = np.array(self.sample_n(sample_size)) - 1
        counts = np.bincount(outcomes, minlength=self._width)
        return counts / sample_size

    def empiric(self, sample_size: int) -> 'Distribution':
        """
        Estimate the shape of this distribution by sampling.

        Outcome identities are discarded: the observed frequencies are sorted
        in descending order and wrapped in a new distribution.

        Args:
            sample_size: Number of samples to draw

        Returns:
            The empirical distribution, sharing this distribution's random source

        Raises:
            ValueError: If sample_size < 1
        """
        frequencies = self._frequencies(sample_size)
        log_empiric(sample_size, self._width, ordered=True)
        return Distribution(np.sort(frequencies)[::-1], rng=self._rng)

    def unordered_empiric(self, sample_size: int) -> np.ndarray:
        """
        Draw a sample and return the observed frequency of every outcome.

        Unlike empiric, the frequencies keep the original outcome order and
        are returned as a bare array.

        Args:
            sample_size: Number of samples to draw

        Returns:
            Array of frequencies, indexed by 0-based outcome

        Raises:
            ValueError: If sample_size < 1
        """
        frequencies = self._frequencies(sample_size)
        log_empiric(sample_size, self._width, ordered=False)
        return frequencies

    def __repr__(self) -> str:
        return f"Distribution({', '.join(str(float(p)) for p in self._probabilities)})"

    # Constructors for frequently used distributions

    @classmethod
    def exponential(cls, lam: float, width: int, rng: Optional[Any] = None) -> 'Distribution':
        """
        Exponential (geometric) distribution cut down at width.

        Args:
            lam: Decay factor between consecutive outcomes, in [0, 1]
            width: Number of outcomes, at least 1
            rng: Optional uniform random source
        """
        if not 0.0 <= lam <= 1.0:
            raise ValueError(f"lam must be in [0, 1], got {lam}")
        _check_width(width)
        normalizer = (1.0 - lam ** width) / (1.0 - lam) if lam < 1 else float(width)
        probabilities = [lam ** i / normalizer for i in range(width)]
        distribution = cls(probabilities, rng=rng)
        log_construction("exponential", {"lam": lam}, width)
        return distribution

    @classmethod
    def uniform(cls, width: int, rng: Optional[Any] = None) -> 'Distribution':
        """Uniform distribution over width outcomes."""
        _check_width(width)
        distribution = cls([1.0 / width] * width, rng=rng)
        log_construction("uniform", {}, width)
        return distribution

    @classmethod
    def dirac(cls, width: int, rng: Optional[Any] = None) -> 'Distribution':
        """Dirac delta: all mass on the first of width outcomes."""
        _check_width(width)
        distribution = cls([1.0] + [0.0] * (width - 1), rng=rng)
        log_construction("dirac", {}, width)
        return distribution

    @classmethod
    def linear(cls, spread: int, width: int, rng: Optional[Any] = None) -> 'Distribution':
        """
        Linearly decreasing distribution.

        Outcome i (0-based) gets weight spread - i for i < spread, and 0 beyond.
        When spread >= width the triangle is truncated at width.

        Args:
            spread: Length of the full triangle, at least 1
            width: Number of outcomes, at least 1
            rng: Optional uniform random source
        """
        _check_width(width)
        if spread < 1:
            raise ValueError(f"spread must be at least 1, got {spread}")
        if spread >= width:
            normalizer = width * (2 * spread - width + 1) / 2
        else:
            normalizer = spread * (spread + 1) / 2
        probabilities = [(spread - i) / normalizer if i < spread else 0.0 for i in range(width)]
        distribution = cls(probabilities, rng=rng)
        log_construction("linear", {"spread": spread}, width)
        return distribution

    @classmethod
    def zeta(cls, exponent: float, shift: float, width: int, rng: Optional[Any] = None) -> 'Distribution':
        """
        Zeta (power-law) distribution cut down at width.

        Outcome i (0-based) gets weight (i + shift) ** -exponent.

        Args:
            exponent: Power-law exponent, at least 0
            shift: Offset added to the rank, strictly positive
            width: Number of outcomes, at least 1
            rng: Optional uniform random source
        """
        _check_width(width)
        if exponent < 0:
            raise ValueError(f"exponent must be non-negative, got {exponent}")
        if shift <= 0:
            raise ValueError(f"shift must be positive, got {shift}")
        values = (np.arange(width) + shift) ** -float(exponent)
        distribution = cls(values / values.sum(), rng=rng)
        log_construction("zeta", {"exponent": exponent, "shift": shift}, width)
        return distribution

    @classmethod
    def two_step(cls, spread: float, width: int, rng: Optional[Any] = None) -> 'Distribution':
        """
        Two-step distribution with spread equally likely outcomes.

        The first floor(spread) outcomes get 1 / spread each, the next one gets
        the fractional remainder and the rest get 0, so spread may be fractional.

        Args:
            spread: Effective number of flat outcomes, in (0, width]
            width: Number of outcomes, at least 1
            rng: Optional uniform random source
        """
        _check_width(width)
        if not 0 < spread <= width:
            raise ValueError(f"spread must be in (0, {width}], got {spread}")
        height = 1.0 / spread
        steps = math.floor(spread)
        remainder = (spread - steps) / spread
        probabilities = [height if i < steps else remainder if i == steps else 0.0
                         for i in range(width)]
        distribution = cls(probabilities, rng=rng)
        log_construction("two_step", {"spread": spread}, width)
        return distribution


def _check_width(width: int) -> None:
    if width < 1:
        raise ValueError(f"width must be at least 1, got {width}")
