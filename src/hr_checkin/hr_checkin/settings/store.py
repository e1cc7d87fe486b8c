from __future__ import annotations

import logging
import threading
from typing import Callable

from ..lateness.model import AttendanceConfig

logger = logging.getLogger(__name__)


class SettingsStore:
    """Holds the current attendance configuration.

    Callers get a frozen value and save a whole new one; a reader never sees
    a half-applied change.
    """

    def __init__(self, config: AttendanceConfig):
        self._config = config
        self._lock = threading.RLock()

    def get(self) -> AttendanceConfig:
        with self._lock:
            return self._config

    def save(self, config: AttendanceConfig) -> AttendanceConfig:
        with self._lock:
            self._config = config
        logger.info(
            "Attendance settings saved: threshold=%s rules=%d policy=%s",
            config.late_threshold, len(config.rules), config.deduction_policy.value,
        )
        return config

    def update(self, change: Callable[[AttendanceConfig], AttendanceConfig]) -> AttendanceConfig:
        """Apply ``change`` to the current value and save the result atomically.

        If ``change`` raises, the stored value is left as it was.
        """
        with self._lock:
            return self.save(change(self._config))
