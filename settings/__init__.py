from settings.base import BASE_PATH
from settings.core import core_settings
from settings.db import db_settings

__all__ = [
    "core_settings",
    "db_settings",
    "BASE_PATH",
]
