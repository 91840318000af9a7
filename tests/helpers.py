"""Test helpers for generating version strings."""

import random
from typing import List


SUFFIXES = ["", "", "", "rc1", "rc2", "-pre", "-pre.20240101.1", "-pre3", "+build", "-beta", " banana"]


def generate_versions(seed: int, count: int = 40) -> List[str]:
    """Generate valid version strings, the empty sentinel included."""
    rng = random.Random(seed)
    versions = [""]
    for _ in range(count):
        release = ".".join(str(rng.randint(0, 3)) for _ in range(rng.randint(1, 4)))
        versions.append(release + rng.choice(SUFFIXES))
    rng.shuffle(versions)
    return versions
