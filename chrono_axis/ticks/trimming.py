"""Edge trimming: drop ticks that crowd the range bounds"""


def crowds_lower_bound(instants: list[int]) -> bool:
    """
    Check if the second tick sits too close to the lower bound

    Too close means less than half the gap to the third tick. This happens,
    e.g., for a range starting Dec 25 with yearly ticks: Jan 1 follows only
    a week later.
    """
    if len(instants) <= 2:
        return False
    lower, second, third = instants[0], instants[1], instants[2]
    return second - lower < (third - second) // 2


def crowds_upper_bound(instants: list[int]) -> bool:
    """Check if the second-to-last tick sits too close to the upper bound"""
    if len(instants) <= 2:
        return False
    previous_last, last, upper = instants[-3], instants[-2], instants[-1]
    return upper - last < (last - previous_last) // 2


def trim_edges(instants: list[int]) -> list[int]:
    """
    Remove ticks crowding either bound

    Both checks look at the untrimmed list and are applied independently;
    if both pick the same tick it is removed once. The bounds themselves
    are never removed.

    Args:
        instants: Evened ticks including both bounds

    Returns:
        New list without the crowding ticks
    """
    if len(instants) <= 2:
        return list(instants)

    dropped = set()
    if crowds_lower_bound(instants):
        dropped.add(1)
    if crowds_upper_bound(instants):
        dropped.add(len(instants) - 2)

    return [instant for i, instant in enumerate(instants) if i not in dropped]
