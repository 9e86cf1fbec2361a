from dataclasses import dataclass

from fourstack.components.cell import Side


@dataclass(slots=True)
class PlayerSide:
    side: Side
    name: str = ""
