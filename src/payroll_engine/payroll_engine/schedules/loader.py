from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from ..common.validators import option_key
from ..core.enums import ViolationCode
from ..core.exceptions import ConfigurationError
from .model import ScheduleConfig
from .validation import ConfigViolation

logger = logging.getLogger(__name__)


def load_schedule_config(options: Optional[Mapping[str, Any]] = None) -> ScheduleConfig:
    """Build the process-wide ScheduleConfig from defaults plus overrides.

    ``None`` values fall back to the default for that option. Unknown keys,
    unparsable values and invariant failures are reported together in one
    ``ConfigurationError``.
    """
    known = set(ScheduleConfig.option_names())
    overrides: dict[str, Any] = {}
    violations: list[ConfigViolation] = []

    for raw_key, value in (options or {}).items():
        key = option_key(raw_key)
        if key not in known:
            violations.append(ConfigViolation(ViolationCode.UNKNOWN_OPTION, raw_key, value))
            continue
        if value is None or (isinstance(value, str) and not value.strip()):
            continue
        overrides[key] = value

    try:
        config = ScheduleConfig(**overrides)
    except ConfigurationError as exc:
        raise ConfigurationError(violations + list(exc.violations)) from None

    if violations:
        raise ConfigurationError(violations)

    logger.info("schedule config loaded: %s", config.describe())
    return config
