from __future__ import annotations

"""Base component class for the Streamlit UI.

All tabs/components inherit from `BaseComponent` and implement the
`render()` method. Components receive the session's `TrackerService`
through their constructor to keep them decoupled and testable.
"""

from dataclasses import dataclass

from ui.services import TrackerService


@dataclass
class BaseComponent:
    """Base class for all UI components.

    Attributes:
        service: Session tracker service (state, actions, settings)
    """

    service: TrackerService

    @property
    def state(self):
        return self.service.state

    @property
    def manager(self):
        return self.service.manager

    def render(self) -> None:
        """Render the component.

        Subclasses must override this method to draw Streamlit widgets
        and trigger actions via the tracker manager.
        """
        raise NotImplementedError("Subclasses must implement render()")
