from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(ABC, Generic[T, ID]):
    """Repository 基底クラス

    - エンティティの永続化を抽象化する
    - 読み取りは常に最新のスナップショット全体を返す
    """

    @abstractmethod
    def find_all(self) -> list[T]:
        """全件を取得する（登録順）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, id: ID) -> T | None:
        """IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def add(self, item: T) -> None:
        """追加する"""
        raise NotImplementedError
