from collections import namedtuple
from enum import Enum

from loguru import logger

from yatzyscore.dice import count_dice


class ScoringSection(Enum):
    UPPER = "Upper"
    LOWER = "Lower"


class ScoringCategory(Enum):
    ones = "ones"
    twos = "twos"
    threes = "threes"
    fours = "fours"
    fives = "fives"
    sixes = "sixes"
    three_of_a_kind = "three_of_a_kind"
    four_of_a_kind = "four_of_a_kind"
    small_straight = "small_straight"
    large_straight = "large_straight"
    full_house = "full_house"
    chance = "chance"
    yatzy = "yatzy"


Category = namedtuple(
    "category", ["category", "name", "description", "section", "score"]
)


def make_category(*args, name=None, description="", section=ScoringSection.LOWER):
    """Decorator that creates a new category from a scoring function.

    The function name must be a member of ``ScoringCategory``.
    """

    def inner(func):
        category = ScoringCategory(func.__name__)
        display_name = name or func.__name__.replace("_", " ").title()
        return Category(category, display_name, description, section, func)

    if args and callable(args[0]):
        return inner(args[0])

    return inner


class Ruleset:
    """Represents the rules of the game.

    Used to convert rolls and categories to scores, and to compute section
    totals, the upper section bonus, and the grand total from a mapping of
    recorded scores. Missing or ``None`` entries count as 0.
    """

    def __init__(
        self,
        categories,
        num_dice=5,
        bonus_cutoff=63,
        bonus_score=50,
        ruleset_name="custom",
    ):
        self.name = ruleset_name
        self.num_dice = num_dice
        self.num_categories = len(categories)
        self.categories = categories
        self.categories_by_id = {cat.category: cat for cat in categories}

        if len(self.categories_by_id) != self.num_categories:
            raise ValueError("Categories must be unique")

        self.bonus_cutoff_ = bonus_cutoff
        self.bonus_score_ = bonus_score

    def get_category(self, category):
        return self.categories_by_id[ScoringCategory(category)]

    def section_categories(self, section):
        return tuple(cat.category for cat in self.categories if cat.section == section)

    def score(self, category, roll):
        cat = self.get_category(category)
        dice_count = count_dice(roll, self.num_dice)
        score = cat.score(dice_count)
        logger.debug("Scored {} as {}: {}", list(roll), cat.category.value, score)
        return score

    def _section_total(self, scores, section):
        scores = {
            ScoringCategory(category): score for category, score in scores.items()
        }

        total = 0
        for category in self.section_categories(section):
            total += scores.get(category) or 0
        return total

    def upper_section_total(self, scores):
        return self._section_total(scores, ScoringSection.UPPER)

    def lower_section_total(self, scores):
        return self._section_total(scores, ScoringSection.LOWER)

    def upper_section_bonus(self, scores):
        if self.upper_section_total(scores) >= self.bonus_cutoff_:
            return self.bonus_score_

        return 0

    def score_summary(self, scores):
        return self.upper_section_total(scores), self.lower_section_total(scores)

    def total(self, scores):
        upper_score, lower_score = self.score_summary(scores)
        return upper_score + self.upper_section_bonus(scores) + lower_score

    def __repr__(self):
        return f"{self.__class__.__name__}(ruleset_name={self.name})"
