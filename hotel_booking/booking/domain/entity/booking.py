from datetime import date, datetime

from hotel_booking.booking.domain.value_object import StayPeriod
from hotel_booking.shared.domain import Entity
from hotel_booking.shared.domain.exception import BusinessRuleViolationException
from hotel_booking.shared.utils.dates import to_date

UNASSIGNED = 0


class Booking(Entity[int]):
    """予約エンティティ

    - 日付は日付のみで扱う（datetime は時刻を切り捨てる）
    - room_id は BookingManager が部屋を割り当てるまで 0
    """

    def __init__(
        self,
        start_date: date | datetime | str | None = None,
        end_date: date | datetime | str | None = None,
        is_active: bool = True,
        customer_id: int = 0,
        room_id: int = UNASSIGNED,
        id: int = UNASSIGNED,
    ) -> None:
        super().__init__(id)
        self._start_date = to_date(start_date)
        self._end_date = to_date(end_date)
        self._is_active = is_active
        self._customer_id = customer_id
        self._room_id = room_id

    @property
    def start_date(self) -> date | None:
        return self._start_date

    @property
    def end_date(self) -> date | None:
        return self._end_date

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def customer_id(self) -> int:
        return self._customer_id

    @property
    def room_id(self) -> int:
        return self._room_id

    @property
    def period(self) -> StayPeriod:
        """予約期間（有効な予約のみ）"""
        if not self.is_valid():
            raise BusinessRuleViolationException(
                f"Booking {self.id} does not have a valid period"
            )
        return StayPeriod(start=self._start_date, end=self._end_date)

    def is_valid(self) -> bool:
        """日付が設定済みで、開始日 < 終了日 かどうか"""
        return (
            self._start_date is not None
            and self._end_date is not None
            and self._start_date < self._end_date
        )

    def assign_id(self, id: int) -> None:
        """リポジトリ採番のIDを設定する"""
        if not self.is_transient():
            raise BusinessRuleViolationException(
                f"Booking already has an id: {self.id}"
            )
        self._id = id

    def assign_room(self, room_id: int) -> None:
        """部屋を割り当てる"""
        self._room_id = room_id

    def deactivate(self) -> None:
        """予約を無効化する（キャンセル）"""
        self._is_active = False

    def __repr__(self) -> str:
        return (
            f"Booking(id={self.id!r}, start_date={self.start_date!r}, "
            f"end_date={self.end_date!r}, is_active={self.is_active!r}, "
            f"customer_id={self.customer_id!r}, room_id={self.room_id!r})"
        )
