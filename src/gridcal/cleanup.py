# SPDX-License-Identifier: MIT

import atexit

from gridcal.repository.configuration import CONFIGURATION_REPO
from gridcal.repository.event import EVENT_REPO


def flush() -> None:
    CONFIGURATION_REPO.flush()
    EVENT_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush)
