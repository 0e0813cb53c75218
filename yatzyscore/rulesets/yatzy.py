from yatzyscore.dice import group_dice, sum_of_all_dice

from .base import make_category, Ruleset, ScoringSection

SMALL_STRAIGHTS = ((1, 2, 3, 4), (2, 3, 4, 5), (3, 4, 5, 6))
LARGE_STRAIGHTS = ((1, 2, 3, 4, 5), (2, 3, 4, 5, 6))


def _has_straight(dice_count, straights):
    faces = {die_value for die_value, num_dice in enumerate(dice_count, 1) if num_dice}
    return any(faces.issuperset(straight) for straight in straights)


@make_category(
    section=ScoringSection.UPPER,
    description="The sum of all dice showing the number 1.",
)
def ones(dice_count):
    return 1 * int(dice_count[0])


@make_category(
    section=ScoringSection.UPPER,
    description="The sum of all dice showing the number 2.",
)
def twos(dice_count):
    return 2 * int(dice_count[1])


@make_category(
    section=ScoringSection.UPPER,
    description="The sum of all dice showing the number 3.",
)
def threes(dice_count):
    return 3 * int(dice_count[2])


@make_category(
    section=ScoringSection.UPPER,
    description="The sum of all dice showing the number 4.",
)
def fours(dice_count):
    return 4 * int(dice_count[3])


@make_category(
    section=ScoringSection.UPPER,
    description="The sum of all dice showing the number 5.",
)
def fives(dice_count):
    return 5 * int(dice_count[4])


@make_category(
    section=ScoringSection.UPPER,
    description="The sum of all dice showing the number 6.",
)
def sixes(dice_count):
    return 6 * int(dice_count[5])


@make_category(
    name="Three of a Kind",
    description="Three dice showing the same number. Score: Sum of all the dice.",
)
def three_of_a_kind(dice_count):
    _, largest_group = group_dice(dice_count)[0]
    if largest_group >= 3:
        return sum_of_all_dice(dice_count)

    return 0


@make_category(
    name="Four of a Kind",
    description="Four dice with the same number. Score: Sum of all the dice.",
)
def four_of_a_kind(dice_count):
    _, largest_group = group_dice(dice_count)[0]
    if largest_group >= 4:
        return sum_of_all_dice(dice_count)

    return 0


@make_category(
    description="Any set of three combined with a different pair. Score: 25 points."
)
def full_house(dice_count):
    # five of a kind is a single group and does not count
    group_sizes = [size for _, size in group_dice(dice_count)]
    if group_sizes == [3, 2]:
        return 25

    return 0


@make_category(description="Sequence of 4 dice. Score: 30 points.")
def small_straight(dice_count):
    if _has_straight(dice_count, SMALL_STRAIGHTS):
        return 30

    return 0


@make_category(description="Sequence of 5 dice. Score: 40 points.")
def large_straight(dice_count):
    if _has_straight(dice_count, LARGE_STRAIGHTS):
        return 40

    return 0


@make_category(
    name="Yatzy",
    description="All five dice with the same number. Score: 50 points.",
)
def yatzy(dice_count):
    _, largest_group = group_dice(dice_count)[0]
    if largest_group == 5:
        return 50

    return 0


@make_category(description="Any combination of dice. Score: Sum of all the dice.")
def chance(dice_count):
    return sum_of_all_dice(dice_count)


yatzy_rules = Ruleset(
    ruleset_name="yatzy",
    num_dice=5,
    categories=(
        ones,
        twos,
        threes,
        fours,
        fives,
        sixes,
        three_of_a_kind,
        four_of_a_kind,
        full_house,
        small_straight,
        large_straight,
        yatzy,
        chance,
    ),
    bonus_cutoff=63,
    bonus_score=50,
)
