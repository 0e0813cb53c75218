from math import factorial
from functools import lru_cache
from collections import Counter
import itertools

import tqdm
import numpy as np


@lru_cache(maxsize=None)
def num_unique_permutations(tup):
    item_count = Counter(tup)
    norm_factor = 1
    for count in item_count.values():
        norm_factor *= factorial(count)
    return factorial(len(tup)) // norm_factor


def expected_scores(ruleset, progress=False):
    """Score every possible roll in every category.

    Returns a dict mapping each category to its mean score and the probability
    of scoring anything at all, over all equally likely ordered rolls.
    """
    num_dice = ruleset.num_dice

    # all possible unique rolls with n 6-sided dice
    roll_combinations = itertools.combinations_with_replacement(range(1, 7), num_dice)
    total_elements = factorial(5 + num_dice) // factorial(num_dice) // factorial(5)

    weights = []
    scores = []

    for roll in tqdm.tqdm(
        roll_combinations,
        desc="Scoring all rolls... " + "🎲" * num_dice,
        total=total_elements,
        disable=not progress,
    ):
        weights.append(num_unique_permutations(roll))
        scores.append([ruleset.score(cat.category, roll) for cat in ruleset.categories])

    weights = np.array(weights)
    scores = np.array(scores)
    assert weights.sum() == 6 ** num_dice

    result = {}
    for cat_idx, cat in enumerate(ruleset.categories):
        result[cat.category] = {
            "mean": float(np.average(scores[:, cat_idx], weights=weights)),
            "hit_rate": float(np.average(scores[:, cat_idx] > 0, weights=weights)),
            "max": int(scores[:, cat_idx].max()),
        }

    return result
