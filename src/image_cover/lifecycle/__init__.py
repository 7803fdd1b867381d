from image_cover.lifecycle.controller import CoverController
from image_cover.lifecycle.hooks import RecordLifecycleHooks

__all__ = ["CoverController", "RecordLifecycleHooks"]
