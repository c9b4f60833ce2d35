"""Data models module."""

from src.models.candidate import (
    Candidate,
    CommitteeRef,
    LeaderCategory,
    Office,
)

__all__ = [
    "Candidate",
    "CommitteeRef",
    "LeaderCategory",
    "Office",
]
