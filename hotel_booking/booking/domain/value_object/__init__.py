from .stay_period import StayPeriod

__all__ = ["StayPeriod"]
