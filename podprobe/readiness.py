"""
就绪检查模块

默认没有任何检查项，服务始终就绪。
需要真实就绪判断时，通过 ReadinessGate.add_check 注册谓词。
"""
import logging
from typing import Callable, Dict, List, Tuple

logger = logging.getLogger(__name__)

ReadinessCheck = Callable[[], bool]


class ReadinessGate:
    """就绪谓词集合"""
    
    def __init__(self):
        self._checks: Dict[str, ReadinessCheck] = {}
    
    def add_check(self, name: str, check: ReadinessCheck):
        self._checks[name] = check
    
    def remove_check(self, name: str):
        self._checks.pop(name, None)
    
    def evaluate(self) -> Tuple[bool, List[str]]:
        """返回 (是否就绪, 未通过的检查名)"""
        failed = []
        for name, check in list(self._checks.items()):
            try:
                ok = bool(check())
            except Exception as e:
                logger.warning(f"就绪检查 {name} 异常: {e}")
                ok = False
            if not ok:
                failed.append(name)
        return not failed, failed
