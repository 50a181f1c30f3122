"""Utility modules for cps."""

from cps.utils.ids import create_id, ID_LENGTH
from cps.utils.time_utils import now_ms

__all__ = [
    "create_id",
    "ID_LENGTH",
    "now_ms",
]
