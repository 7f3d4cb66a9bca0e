"""Pydantic response models for the converter API."""

from .conversion import ConversionOut, HealthOut

__all__ = [
    "ConversionOut",
    "HealthOut",
]
