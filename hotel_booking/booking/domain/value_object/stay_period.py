from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date, timedelta


@dataclass(frozen=True)
class StayPeriod:
    """滞在期間（日付のみ、開始日・終了日を両端とも含む）"""

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError("End date must not be before start date")

    def overlaps(self, start: date, end: date) -> bool:
        """指定期間と重なるかどうか

        境界が一致する場合（終了日 == 指定開始日など）も重なりとみなす。
        """
        return self.start <= end and self.end >= start

    def covers(self, day: date) -> bool:
        """指定日を含むかどうか"""
        return self.start <= day <= self.end

    def days(self) -> Iterator[date]:
        """期間内の日付を昇順で返す"""
        for offset in range((self.end - self.start).days + 1):
            yield self.start + timedelta(days=offset)

    def nights(self) -> int:
        """宿泊数を計算する"""
        return (self.end - self.start).days
