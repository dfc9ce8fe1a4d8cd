"""Bridge repair: which equations can be made true with + , * and ||."""


def parse_equations(text):
    """Lines of ``target: n1 n2 ...`` become (target, [n1, n2, ...]) pairs."""
    equations = []
    for line in text.splitlines():
        target, sep, rest = line.partition(":")
        if not sep:
            raise ValueError(f"missing ':' in line {line!r}")
        equations.append((int(target), [int(token) for token in rest.split()]))
    return equations


def _concat(left, right):
    return left * 10 ** len(str(right)) + right


def can_solve(target, numbers, allow_concat=False):
    """True if some left-to-right choice of operators yields the target."""
    if not numbers:
        raise ValueError("an equation needs at least one number")
    values = {numbers[0]}
    for number in numbers[1:]:
        following = set()
        for value in values:
            following.add(value + number)
            following.add(value * number)
            if allow_concat:
                following.add(_concat(value, number))
        values = following
    return target in values


def calibration_total(text):
    """Sum of the targets reachable with addition and multiplication."""
    return sum(
        target
        for target, numbers in parse_equations(text)
        if can_solve(target, numbers)
    )


def calibration_total_with_concat(text):
    """Sum of the targets reachable when concatenation is allowed too."""
    return sum(
        target
        for target, numbers in parse_equations(text)
        if can_solve(target, numbers, allow_concat=True)
    )