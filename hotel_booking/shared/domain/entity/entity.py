from abc import ABC
from typing import Generic, TypeVar

ID = TypeVar("ID")


class Entity(ABC, Generic[ID]):
    """Entity 基底クラス

    - ID が未採番（0 / None）のエンティティは同一インスタンスのみ等価とみなす
    - ハッシュ値は最初に計算した時点で固定する（採番後も set / dict から引ける）
    """

    def __init__(self, id: ID) -> None:
        self._id = id
        self._hash: int | None = None

    @property
    def id(self) -> ID:
        return self._id

    def is_transient(self) -> bool:
        """ID が未採番かどうか"""
        return not self._id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return False
        if self.is_transient() or other.is_transient():
            return self is other
        return type(self) is type(other) and self._id == other._id

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = id(self) if self.is_transient() else hash(self._id)
        return self._hash
