from fpkit.cursor import values
from fpkit.errors import StepDirectionMismatchError, ZeroStepError


def sum(collection):
    total = 0
    for value in values(collection):
        total += value
    return total


def product(collection):
    total = 1
    for value in values(collection):
        total *= value
    return total


def mean(collection):
    """Arithmetic mean, or None for empty input."""
    total = 0
    count = 0
    for value in values(collection):
        total += value
        count += 1
    if count == 0:
        return None
    return total / count


average = mean


def median(collection):
    ordered = sorted(values(collection))
    if not ordered:
        return None
    middle = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return (ordered[middle - 1] + ordered[middle]) / 2
    return ordered[middle]


def minValue(collection):
    """Smallest value, or None when there is none. None values are skipped."""
    result = None
    for value in values(collection):
        if value is None:
            continue
        if result is None or value < result:
            result = value
    return result


def maxValue(collection):
    """Largest value, or None when there is none. None values are skipped."""
    result = None
    for value in values(collection):
        if value is None:
            continue
        if result is None or value > result:
            result = value
    return result


def clamp(low, high):
    def clamped(value):
        if value < low:
            return low
        if value > high:
            return high
        return value
    return clamped


def closedRange(start, end, step=1):
    """
    Inclusive range from start to end. Works with floats and negative steps;
    the step must point from start towards end.
    """
    if step == 0:
        raise ZeroStepError()
    if (end > start and step < 0) or (end < start and step > 0):
        raise StepDirectionMismatchError(start, end, step)
    result = []
    current = start
    if step > 0:
        while current <= end:
            result.append(current)
            current += step
    else:
        while current >= end:
            result.append(current)
            current += step
    return result
