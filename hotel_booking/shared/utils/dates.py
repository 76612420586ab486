from datetime import date, datetime


def to_date(value: date | datetime | str | None) -> date | None:
    """日付のみの値に揃える

    datetime は時刻を切り捨て、文字列は ISO 8601（YYYY-MM-DD）として解釈する。
    None はそのまま返す（未設定を表す）。
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Invalid date value: {value!r}")
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise ValueError(f"Invalid date format: {value}") from e
