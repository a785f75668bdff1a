"""
服务时钟模块 - 进程启动时间
"""
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass(frozen=True)
class ServiceClock:
    """启动时记录一次，之后只读"""
    started_monotonic: float = field(default_factory=time.monotonic)
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def uptime_seconds(self) -> int:
        elapsed = time.monotonic() - self.started_monotonic
        return max(0, int(elapsed))


def utc_timestamp() -> str:
    """当前 UTC 时间 (ISO-8601)"""
    return datetime.now(timezone.utc).isoformat()
