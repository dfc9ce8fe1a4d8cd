"""Corrupted memory: add up the valid mul(a,b) instructions."""

import re

_MUL = r"mul\(([1-9][0-9]{0,2}),([1-9][0-9]{0,2})\)"
_MUL_PATTERN = re.compile(_MUL)
_INSTRUCTION_PATTERN = re.compile(rf"{_MUL}|do\(\)|don't\(\)")


def sum_multiplications(text):
    """Sum of the products of every mul instruction."""
    return sum(int(a) * int(b) for a, b in _MUL_PATTERN.findall(text))


def sum_enabled_multiplications(text):
    """Sum of products, honouring do() and don't() switches across lines."""
    enabled = True
    total = 0
    for match in _INSTRUCTION_PATTERN.finditer(text):
        instruction = match.group(0)
        if instruction == "do()":
            enabled = True
        elif instruction == "don't()":
            enabled = False
        elif enabled:
            total += int(match.group(1)) * int(match.group(2))
    return total