"""Infrastructure layer: the pydantic-backed JSON pipeline and settings."""

from phonecodec.infrastructure.config import DecodeMode, Settings, load_settings
from phonecodec.infrastructure.json_pipeline import JsonPipeline

__all__ = [
    "DecodeMode",
    "JsonPipeline",
    "Settings",
    "load_settings",
]
