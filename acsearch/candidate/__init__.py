from .flush import EmitCandidateFlushHandler
from .holders import (
    EmitCandidateHolder,
    NonOverlappingEmitCandidateHolder,
    OverlappingEmitCandidateHolder,
    remove_overlaps,
)

__all__ = [
    "EmitCandidateFlushHandler",
    "EmitCandidateHolder",
    "NonOverlappingEmitCandidateHolder",
    "OverlappingEmitCandidateHolder",
    "remove_overlaps",
]
