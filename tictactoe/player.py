from dataclasses import dataclass


@dataclass(frozen=True)
class Player:
    """
    name + mark for one side of the game
    """
    name: str
    mark: str

    def __str__(self):
        return f"{self.name} ({self.mark})"
