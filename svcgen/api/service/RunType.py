"""Scheduling mode of a service."""

from enum import Enum


class RunType(str, Enum):
    IMMEDIATE = "immediate"
    INTERVAL = "interval"
    CRON = "cron"
