"""
Statistical check of the deck shuffle.

The table shuffle swaps each position with one drawn from the whole deck.
That reaches every ordering but not with equal probability. This module
measures the bias: it shuffles many times, counts where each card ends up,
and tests the counts against a uniform distribution.
"""

import random
from dataclasses import dataclass
from typing import Callable, List, Optional

import numpy as np
import scipy.stats as stats

from cardtable.common.deck import Deck


@dataclass
class ShuffleReport:
    """
    Result of a uniformity test over card positions.

    Attributes:
        chi_square: Chi-square statistic over every (card, position) cell
        p_value: Probability of a statistic this large under a uniform shuffle
        trials: Number of shuffles counted
        max_deviation: Largest relative distance of a cell from its expected count
    """

    chi_square: float
    p_value: float
    trials: int
    max_deviation: float

    def is_uniform(self, alpha: float = 0.01) -> bool:
        return self.p_value >= alpha

    def to_dict(self) -> dict:
        return {
            "chi_square": self.chi_square,
            "p_value": self.p_value,
            "trials": self.trials,
            "max_deviation": self.max_deviation,
        }


def table_shuffle(cards: List, rng: random.Random) -> None:
    """The engine's own shuffle, applied to a bare list."""
    deck = Deck(cards)
    deck.shuffle(rng)
    cards[:] = deck.cards


def fisher_yates(cards: List, rng: random.Random) -> None:
    """Unbiased reference shuffle drawing only from the unshuffled suffix."""
    for i in range(len(cards) - 1, 0, -1):
        j = rng.randint(0, i)
        cards[i], cards[j] = cards[j], cards[i]


def position_frequencies(
    trials: int,
    seed: Optional[int] = None,
    shuffle: Callable[[List, random.Random], None] = table_shuffle,
    deck_size: int = 52,
) -> np.ndarray:
    """
    Count final positions of each card over repeated shuffles.

    Args:
        trials: Number of shuffles to run
        seed: Seed for the random source
        shuffle: In-place shuffle taking (cards, rng)
        deck_size: Number of distinct cards

    Returns:
        Matrix where cell [card, position] counts how often card ended at position
    """
    if trials <= 0:
        raise ValueError("trials must be positive")

    rng = random.Random(seed)
    freqs = np.zeros((deck_size, deck_size), dtype=np.int64)
    positions = np.arange(deck_size)
    for _ in range(trials):
        cards = list(range(deck_size))
        shuffle(cards, rng)
        freqs[np.asarray(cards), positions] += 1
    return freqs


def uniformity_test(freqs: np.ndarray) -> ShuffleReport:
    """
    Chi-square test of position counts against a uniform shuffle.

    Args:
        freqs: Square matrix from `position_frequencies`

    Returns:
        A ShuffleReport for the whole matrix
    """
    freqs = np.asarray(freqs, dtype=float)
    if freqs.ndim != 2 or freqs.shape[0] != freqs.shape[1]:
        raise ValueError("Frequency matrix must be square")

    trials = int(freqs[0].sum())
    expected = np.full(freqs.shape, trials / freqs.shape[0])

    chi_square, _ = stats.chisquare(freqs.ravel(), expected.ravel())
    # Each row and column total is fixed, leaving (n-1)^2 free cells
    dof = (freqs.shape[0] - 1) ** 2
    p_value = float(stats.chi2.sf(chi_square, dof))
    max_deviation = float(np.max(np.abs(freqs - expected) / expected))

    return ShuffleReport(
        chi_square=float(chi_square),
        p_value=p_value,
        trials=trials,
        max_deviation=max_deviation,
    )
