"""
Freight services.

- FanOutWriter: one freight per destination from a submission
- transition_status / delete_freight: lifecycle operations
"""

from .fanout import FanOutResult, FanOutWriter
from .lifecycle import delete_freight, transition_status

__all__ = [
    "FanOutResult",
    "FanOutWriter",
    "delete_freight",
    "transition_status",
]
