"""
崩溃触发模块 - 用于验证编排平台的重启策略
"""
import os
import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)

CRASH_DELAY_SECONDS = 0.1
CRASH_EXIT_CODE = 1
CRASH_MESSAGE = "Crashing in 100ms... watch your pod restart!"


def _flush_logs():
    for handler in logging.getLogger().handlers:
        try:
            handler.flush()
        except (OSError, ValueError):
            pass


def terminate_process():
    """立即异常退出进程，不执行清理"""
    logger.critical("触发故意崩溃，进程退出")
    _flush_logs()
    os._exit(CRASH_EXIT_CODE)


class CrashTrigger:
    """延迟崩溃调度器，定时器与请求生命周期无关"""
    
    def __init__(self, delay_seconds: float = CRASH_DELAY_SECONDS,
                 terminate: Callable[[], None] = terminate_process):
        self.delay_seconds = delay_seconds
        self.terminate = terminate
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
    
    @property
    def pending(self) -> bool:
        return self._timer is not None
    
    def schedule(self) -> bool:
        """
        调度一次崩溃，立即返回
        已有待触发的崩溃时不重复调度，返回 False
        """
        with self._lock:
            if self._timer is not None:
                return False
            timer = threading.Timer(self.delay_seconds, self.terminate)
            timer.daemon = True
            self._timer = timer
        
        logger.warning(f"将在 {int(self.delay_seconds * 1000)}ms 后崩溃")
        timer.start()
        return True
