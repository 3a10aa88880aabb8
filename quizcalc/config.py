"""Environment-driven defaults for the quiz runner.

CLI flags always win; these only supply the values used when a flag is
omitted.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_CSV = "quiz.csv"
DEFAULT_LIMIT_S = 10

_TRUTHY = ("1", "true", "yes", "on")
_FALSY = ("0", "false", "no", "off", "")


@dataclass
class QuizSettings:
    """Resolved quiz options."""

    csv_path: str = DEFAULT_CSV
    limit_s: int = DEFAULT_LIMIT_S
    shuffle: bool = False

    @classmethod
    def from_env(cls, env: Optional[dict[str, str]] = None) -> QuizSettings:
        """Build settings from QUIZCALC_CSV, QUIZCALC_LIMIT and QUIZCALC_SHUFFLE.

        Unparseable values are logged and replaced by the defaults.
        """
        env = os.environ if env is None else env
        settings = cls()

        csv_path = env.get("QUIZCALC_CSV")
        if csv_path:
            settings.csv_path = csv_path

        raw_limit = env.get("QUIZCALC_LIMIT")
        if raw_limit:
            try:
                limit = int(raw_limit)
            except ValueError:
                limit = -1
            if limit >= 0:
                settings.limit_s = limit
            else:
                logger.warning("Ignoring QUIZCALC_LIMIT=%r (expected a non-negative integer)", raw_limit)

        raw_shuffle = env.get("QUIZCALC_SHUFFLE")
        if raw_shuffle is not None:
            value = raw_shuffle.strip().lower()
            if value in _TRUTHY:
                settings.shuffle = True
            elif value not in _FALSY:
                logger.warning("Ignoring QUIZCALC_SHUFFLE=%r (expected a boolean)", raw_shuffle)

        return settings

    def override(
        self,
        csv_path: Optional[str] = None,
        limit_s: Optional[int] = None,
        shuffle: Optional[bool] = None,
    ) -> QuizSettings:
        """Return a copy with every non-None argument applied."""
        return QuizSettings(
            csv_path=csv_path if csv_path is not None else self.csv_path,
            limit_s=limit_s if limit_s is not None else self.limit_s,
            shuffle=shuffle if shuffle is not None else self.shuffle,
        )
