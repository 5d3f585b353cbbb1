from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv

from config import get_settings_module

from .attendance.repository import AttendanceRepository
from .container import Container, build_container

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.INFO), format=LOG_FORMAT)


def create_engine(attendance: Optional[AttendanceRepository] = None) -> Container:
    """Load settings (APP_ENV + .env), configure logging and build the container.

    Raises ConfigurationError when the schedule settings are invalid; nothing
    is calculated with a bad schedule.
    """
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    container = build_container(
        schedule_config=getattr(settings, "SCHEDULE_CONFIG", None),
        payroll_config=getattr(settings, "PAYROLL_CONFIG", None),
        attendance=attendance,
    )

    if getattr(settings, "DEBUG", False):
        logger.debug("[payroll-engine] settings=%s schedule=%s", settings_module, container.schedule.describe())

    return container
