"""
- Seed for the process-wide random generator
"clock" seeds from wall-clock time. "random.org" asks random.org for one
integer and, if anything goes wrong (no internet, timeout, bad response),
falls back to the clock so a game can still start.
"""

import logging
from time import time

import requests

logger = logging.getLogger(__name__)

RANDOM_URL = "https://www.random.org/integers/"
MAX_SEED = 1_000_000_000


def clock_seed() -> int:
    return int(time())


def fetch_seed(source: str = "clock") -> int:
    if source != "random.org":
        return clock_seed()

    params = {
        "num": 1,
        "min": 0,
        "max": MAX_SEED,
        "col": 1,
        "base": 10,
        "format": "plain",
        "rnd": "new",
    }

    # keep network quick; if it takes too long, we just fall back
    timeout_seconds = 3.0

    try:
        response = requests.get(RANDOM_URL, params=params, timeout=timeout_seconds)
        response.raise_for_status()

        # The body looks like: 123456789\n
        lines = [line.strip() for line in response.text.splitlines() if line.strip()]
        if len(lines) != 1:
            raise ValueError(f"random.org returned {len(lines)} values, expected 1.")

        seed = int(lines[0])
        if seed < 0 or seed > MAX_SEED:
            raise ValueError("random.org number out of range.")
        return seed

    except (requests.RequestException, ValueError) as exc:
        logger.warning("random.org seed unavailable (%s); using clock seed", exc)
        return clock_seed()
