"""Service layer for the BMI tracker UI.

Services encapsulate configuration, API access and session bookkeeping
so UI components can remain thin and focused on presentation.
"""

from .tracker_service import TrackerService

__all__ = [
    "TrackerService",
]
