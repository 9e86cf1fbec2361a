from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(slots=True)
class TurnOrder:
    """Owner entities in playing order; ``index`` points at the owner to move."""
    owners: List[int] = field(default_factory=list)
    index: int = 0

    def current(self) -> Optional[int]:
        if not self.owners:
            return None
        return self.owners[self.index % len(self.owners)]

    def advance(self) -> Optional[int]:
        """Hand the turn to the next owner and return it."""
        if not self.owners:
            return None
        self.index = (self.index + 1) % len(self.owners)
        return self.owners[self.index]

    def start_with(self, owner_entity: int) -> None:
        """Point the order at ``owner_entity``; unknown owners are ignored."""
        if owner_entity in self.owners:
            self.index = self.owners.index(owner_entity)
