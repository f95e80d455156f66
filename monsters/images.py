"""
Image name assignment for new monsters.

Monsters reference a bundled image asset by name (``monster_1`` ..
``monster_30``). The store picks one at insertion time; resolving the name
to an actual resource is the caller's job.
"""
from __future__ import annotations

import random
from typing import Optional

IMAGE_PREFIX = "monster_"
IMAGE_COUNT = 30


def random_image_name(rng: Optional[random.Random] = None) -> str:
    """
    Pick an image name uniformly from the bundled set.

    Args:
        rng: Random source to draw from (module-level ``random`` if None)

    Returns:
        A name like ``monster_17``
    """
    source = rng if rng is not None else random
    return f"{IMAGE_PREFIX}{source.randint(1, IMAGE_COUNT)}"

