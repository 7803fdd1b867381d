"""Lifecycle state of one record image operation."""

from enum import Enum


class LifecycleState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SAVING = "saving"
    MOVING = "moving"
    REPLACING = "replacing"
    DELETING = "deleting"
    DONE = "done"
    FAILED = "failed"
