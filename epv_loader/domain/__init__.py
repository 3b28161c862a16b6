"""
Domain package for the EPV loader.

Exports the record model shared by the pipeline stages.
"""

from epv_loader.domain.models import Record

__all__ = [
    "Record",
]
