# SPDX-License-Identifier: MIT

import random
import string
import time

EntityId = str

_ID_SUFFIX_ALPHABET = string.digits + string.ascii_lowercase


def generate_event_id() -> EntityId:
    """Millisecond timestamp plus nine random base36 characters."""
    suffix = "".join(random.choices(_ID_SUFFIX_ALPHABET, k=9))
    return f"{time.time_ns() // 1_000_000}-{suffix}"
