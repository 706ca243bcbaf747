"""
Conversion of decimal degrees to degrees, minutes, seconds.
"""

import math
from decimal import Decimal, ROUND_HALF_UP

SECONDS_QUANTUM = Decimal('0.0001')


def to_dms(decimal_degrees: float, is_latitude: bool) -> str:
    """
    Convert a decimal degree value to a DMS label.

    Args:
        decimal_degrees: Signed value in decimal degrees
        is_latitude: True for N/S hemisphere letters, False for E/W

    Returns:
        String formatted as DD°MM'SS.SSSS" H, e.g. 41°48'0.0000" N

    Note:
        Degrees and minutes are floored and seconds are rounded to four
        places without carrying, so seconds can display as 60.0000.
        The decomposition works on the shortest decimal representation
        of the value, so 41.8 gives 48 minutes and not 47'60".
    """
    if is_latitude:
        hemisphere = 'N' if decimal_degrees >= 0 else 'S'
    else:
        hemisphere = 'E' if decimal_degrees >= 0 else 'W'

    magnitude = abs(Decimal(repr(float(decimal_degrees))))
    degrees = math.floor(magnitude)
    minutes_float = (magnitude - degrees) * 60
    minutes = math.floor(minutes_float)
    seconds = ((minutes_float - minutes) * 60).quantize(SECONDS_QUANTUM, rounding=ROUND_HALF_UP)

    return f"{degrees}°{minutes}'{seconds:f}\" {hemisphere}"
