"""
Configuration module for the timesheet grouping tools.
"""
from .settings import (
    GroupingConfig,
    get_config,
    load_config,
    reload_config
)

__all__ = [
    'GroupingConfig',
    'get_config',
    'load_config',
    'reload_config'
]
