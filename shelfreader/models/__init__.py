"""Data models for the shelf reader."""

from shelfreader.models.record import PLACEHOLDER, BookRecord

__all__ = ["BookRecord", "PLACEHOLDER"]
