import numpy as np

NUM_FACES = 6


def count_dice(roll, num_dice=5):
    """Convert a roll into a count of each die value (index 0 is face 1).

    Malformed rolls are a caller error and fail the assertions below.
    """
    roll = np.asarray(roll, dtype="int")
    assert roll.shape == (num_dice,), f"expected {num_dice} dice, got {roll.tolist()}"
    assert np.all(
        (roll >= 1) & (roll <= NUM_FACES)
    ), f"invalid die value in {roll.tolist()}"
    return np.bincount(roll, minlength=NUM_FACES + 1)[1:]


def group_dice(dice_count):
    """Return (face, size) pairs, largest groups first.

    Equal-size groups keep ascending face order.
    """
    groups = [
        (die_value, int(num_dice))
        for die_value, num_dice in enumerate(dice_count, 1)
        if num_dice > 0
    ]
    return sorted(groups, key=lambda group: group[1], reverse=True)


def sum_of_all_dice(dice_count):
    return int(
        sum(die_value * num_dice for die_value, num_dice in enumerate(dice_count, 1))
    )
