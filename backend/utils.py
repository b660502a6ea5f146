import math


def round_half_up(value):
    """Round to the nearest integer with .5 going up, as the web client does."""
    return int(math.floor(float(value) + 0.5))
