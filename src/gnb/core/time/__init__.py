from gnb.core.time.abc import Time
from gnb.core.time.real import RealTime

__all__ = [
    "RealTime",
    "Time",
]
