"""Image cover lifecycle package."""

__version__ = "1.0.0"
__description__ = (
    "Upload, watermark, thumbnail and clean up images attached to data records"
)

__all__ = ["core", "lifecycle"]
