from hotel_booking.shared.domain import Entity


class Room(Entity[int]):
    """客室エンティティ（作成後は不変）"""

    def __init__(self, id: int, description: str = "") -> None:
        if id <= 0:
            raise ValueError(f"Room id must be positive: {id}")
        super().__init__(id)
        self._description = description

    @property
    def description(self) -> str:
        return self._description

    def __repr__(self) -> str:
        return f"Room(id={self.id!r}, description={self.description!r})"
