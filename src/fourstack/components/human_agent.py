from dataclasses import dataclass


@dataclass(slots=True)
class HumanAgent:
    """Marker component for the owner driven by mouse input."""
