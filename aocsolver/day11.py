"""Plutonian pebbles: count stones after repeated blinks."""

from functools import lru_cache

DEFAULT_BLINKS = 75
_MULTIPLIER = 2024


def blink(stone):
    """The stones that one stone turns into after a single blink."""
    if stone == 0:
        return [1]
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return [int(digits[:half]), int(digits[half:])]
    return [stone * _MULTIPLIER]


@lru_cache(maxsize=None)
def _count(stone, blinks):
    if blinks == 0:
        return 1
    return sum(_count(next_stone, blinks - 1) for next_stone in blink(stone))


def count_stones(stone, blinks):
    """Number of stones one stone becomes after the given number of blinks."""
    if blinks < 0:
        raise ValueError("the number of blinks cannot be negative")
    return _count(stone, blinks)


def total_stones(text, blinks=DEFAULT_BLINKS):
    """Number of stones after blinking at every space-separated stone."""
    return sum(count_stones(int(token), blinks) for token in text.split())