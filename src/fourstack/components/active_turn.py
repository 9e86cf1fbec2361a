from dataclasses import dataclass

@dataclass(slots=True)
class ActiveTurn:
    """Marks which owner entity may drop the next piece."""
    owner_entity: int
