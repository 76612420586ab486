import threading
from collections import defaultdict
from collections.abc import Callable
from contextlib import AbstractContextManager
from datetime import date, datetime
from typing import NoReturn

from hotel_booking.booking.domain.entity import Booking
from hotel_booking.booking.domain.repository import BookingRepository, RoomRepository
from hotel_booking.booking.domain.value_object import StayPeriod
from hotel_booking.shared.domain.exception import InvalidArgumentException
from hotel_booking.shared.utils.dates import to_date
from hotel_booking.shared.utils.logger import get_logger

NO_ROOM_AVAILABLE = -1

logger = get_logger("booking")

DateLike = date | datetime | str | None


class BookingManager:
    """予約判定のドメインサービス

    - 空室検索、予約作成（部屋割り当て）、満室日の集計を行う
    - 呼び出しごとに両レポジトリから最新のスナップショットを読み直す（状態を持たない）
    - create_booking の「空室確認 → 追加」は lock で直列化する
    """

    def __init__(
        self,
        booking_repository: BookingRepository,
        room_repository: RoomRepository,
        today: Callable[[], date] = date.today,
        lock: AbstractContextManager | None = None,
    ) -> None:
        self._booking_repository = booking_repository
        self._room_repository = room_repository
        self._today = today
        self._lock = lock if lock is not None else threading.Lock()

    def find_available_room(self, start_date: DateLike, end_date: DateLike) -> int:
        """指定期間に空いている最初の部屋IDを返す

        Returns:
            int: 部屋ID。全室埋まっている場合は NO_ROOM_AVAILABLE (-1)

        Raises:
            InvalidArgumentException: 開始日が過去、または開始日 >= 終了日の場合
        """
        start, end = self._coerce(start_date, end_date)
        if start < self._today():
            self._reject("The start date cannot be in the past", start, end)
        if start >= end:
            self._reject("The start date must be before the end date", start, end)

        bookings_by_room = self._active_bookings_by_room()
        for room in self._room_repository.find_all():
            bookings = bookings_by_room.get(room.id, [])
            if not any(b.period.overlaps(start, end) for b in bookings):
                logger.info(
                    "Found available room",
                    extra={"start_date": start, "end_date": end, "room_id": room.id},
                )
                return room.id

        logger.info(
            "No room available",
            extra={"start_date": start, "end_date": end},
        )
        return NO_ROOM_AVAILABLE

    def create_booking(self, booking: Booking) -> bool:
        """空室があれば部屋を割り当てて予約を追加する

        Returns:
            bool: 追加した場合 True、全室埋まっている場合 False（何も変更しない）

        レポジトリへの追加が失敗した場合は部屋の割り当てを元に戻して送出する。
        """
        with self._lock:
            room_id = self.find_available_room(booking.start_date, booking.end_date)
            if room_id == NO_ROOM_AVAILABLE:
                return False

            previous_room_id = booking.room_id
            booking.assign_room(room_id)
            try:
                self._booking_repository.add(booking)
            except Exception:
                booking.assign_room(previous_room_id)
                raise

        logger.info(
            "Booking created",
            extra={"booking_id": booking.id, "room_id": room_id},
        )
        return True

    def get_fully_occupied_dates(
        self, start_date: DateLike, end_date: DateLike
    ) -> list[date]:
        """全室が埋まっている日付を昇順で返す（開始日・終了日を含む）

        Raises:
            InvalidArgumentException: 開始日 > 終了日の場合
        """
        start, end = self._coerce(start_date, end_date)
        if start > end:
            self._reject("The start date cannot be after the end date", start, end)

        rooms = self._room_repository.find_all()
        if not rooms:
            return []

        bookings_by_room = self._active_bookings_by_room()
        return [
            day
            for day in StayPeriod(start=start, end=end).days()
            if all(
                any(b.period.covers(day) for b in bookings_by_room.get(room.id, []))
                for room in rooms
            )
        ]

    def _active_bookings_by_room(self) -> dict[int, list[Booking]]:
        # 無効（キャンセル済み・日付未設定）の予約は判定に含めない
        bookings_by_room: dict[int, list[Booking]] = defaultdict(list)
        for booking in self._booking_repository.find_all():
            if booking.is_active and booking.is_valid():
                bookings_by_room[booking.room_id].append(booking)
        return bookings_by_room

    def _coerce(self, start_date: DateLike, end_date: DateLike) -> tuple[date, date]:
        try:
            start = to_date(start_date)
            end = to_date(end_date)
        except ValueError as e:
            raise InvalidArgumentException(str(e)) from e
        if start is None or end is None:
            raise InvalidArgumentException("Start date and end date must be set")
        return start, end

    def _reject(self, message: str, start: date, end: date) -> NoReturn:
        logger.warning(message, extra={"start_date": start, "end_date": end})
        raise InvalidArgumentException(message)
