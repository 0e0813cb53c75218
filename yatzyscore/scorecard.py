from loguru import logger

from yatzyscore.rulesets import ScoringCategory


class Scorecard:
    """Recorded scores of a single player.

    Categories without an entry have not been played yet.
    """

    def __init__(self, ruleset, scores=None):
        self.scores = {}

        if scores is not None:
            for category, score in scores.items():
                category = ruleset.get_category(category).category
                if score is not None:
                    self.scores[category] = int(score)

        self.ruleset_ = ruleset

    def copy(self):
        return Scorecard(self.ruleset_, self.scores)

    def is_filled(self, category):
        return ScoringCategory(category) in self.scores

    def open_categories(self):
        return [
            cat.category
            for cat in self.ruleset_.categories
            if cat.category not in self.scores
        ]

    def is_complete(self):
        return not self.open_categories()

    def register_score(self, roll, category):
        category = ScoringCategory(category)
        if self.is_filled(category):
            raise ValueError(f"Cannot score already filled category {category.value}")

        total_score_old = self.total_score()
        self.scores[category] = self.ruleset_.score(category, roll)
        logger.debug(
            "Registered {} points in {}", self.scores[category], category.value
        )
        return self.total_score() - total_score_old

    def upper_section_total(self):
        return self.ruleset_.upper_section_total(self.scores)

    def upper_section_bonus(self):
        return self.ruleset_.upper_section_bonus(self.scores)

    def lower_section_total(self):
        return self.ruleset_.lower_section_total(self.scores)

    def score_summary(self):
        return self.ruleset_.score_summary(self.scores)

    def total_score(self):
        return self.ruleset_.total(self.scores)

    def to_dict(self):
        return {
            cat.category.value: self.scores.get(cat.category)
            for cat in self.ruleset_.categories
        }

    def __repr__(self):
        score_str = ", ".join(
            "None" if score is None else str(score) for score in self.to_dict().values()
        )
        return (
            f"{self.__class__.__name__}(ruleset={self.ruleset_}, scores=[{score_str}])"
        )
