"""
Engine Module

The iterative traversal and the document sources it consumes.
"""

from rsv.engine.source import DocumentSource, as_source
from rsv.engine.traversal import Traversal, TraversalEngine, TraversalResult, WorkItem

__all__ = [
    "DocumentSource",
    "as_source",
    "Traversal",
    "TraversalEngine",
    "TraversalResult",
    "WorkItem",
]
