"""
Random version 4 style identifiers used to relabel reconstructed features.
"""

import random
from typing import Optional

from ..config import FEATURE_ID_PREFIX

ID_TEMPLATE = "xxxxxxxx-xxxx-4xxx-yxxx-xxxxxxxxxxxx"

# SystemRandom keeps no state of its own, so it can be shared between threads.
_default_rng = random.SystemRandom()


def new_id(rng: Optional[random.Random] = None) -> str:
    """
    Generate a random identifier in the 8-4-4-4-12 hex layout.

    The third group always starts with '4' and the fourth group with one
    of '8', '9', 'a' or 'b'.

    Args:
        rng: Random source with a randrange method. Pass a seeded
             random.Random for reproducible identifiers.

    Returns:
        36 character lowercase identifier
    """
    rng = rng or _default_rng
    chars = []
    for c in ID_TEMPLATE:
        if c == 'x':
            chars.append(format(rng.randrange(16), 'x'))
        elif c == 'y':
            chars.append(format((rng.randrange(16) & 0x3) | 0x8, 'x'))
        else:
            chars.append(c)
    return ''.join(chars)


def new_feature_id(rng: Optional[random.Random] = None) -> str:
    """Generate a gml:id value, e.g. 'uuid.1b54b2d6-a5ff-4e57-94c2-f4047a381c64'."""
    return FEATURE_ID_PREFIX + new_id(rng)
