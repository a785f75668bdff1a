#!/usr/bin/env python3
"""
单元5: 崩溃触发器测试

测试内容：
- 调度立即返回
- 延迟后触发
- 重复调度被忽略
"""
import sys
import time
import threading
import pytest
from pathlib import Path
from unittest.mock import patch

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from podprobe.crash import CrashTrigger, terminate_process, CRASH_DELAY_SECONDS, CRASH_EXIT_CODE


class TestCrashTrigger:
    
    def test_default_delay(self):
        assert CRASH_DELAY_SECONDS == 0.1
        assert CrashTrigger().delay_seconds == 0.1
    
    def test_schedule_returns_immediately(self):
        fired = threading.Event()
        trigger = CrashTrigger(delay_seconds=0.5, terminate=fired.set)
        start = time.monotonic()
        assert trigger.schedule() is True
        assert time.monotonic() - start < 0.1
        assert not fired.is_set()
        assert trigger.pending
    
    def test_fires_after_delay(self):
        fired_at = []
        done = threading.Event()
        
        def terminate():
            fired_at.append(time.monotonic())
            done.set()
        
        trigger = CrashTrigger(delay_seconds=0.1, terminate=terminate)
        start = time.monotonic()
        trigger.schedule()
        assert done.wait(2)
        elapsed = fired_at[0] - start
        assert 0.08 <= elapsed < 0.5
    
    def test_second_schedule_ignored(self):
        calls = []
        done = threading.Event()
        
        def terminate():
            calls.append(1)
            done.set()
        
        trigger = CrashTrigger(delay_seconds=0.05, terminate=terminate)
        assert trigger.schedule() is True
        assert trigger.schedule() is False
        assert done.wait(2)
        time.sleep(0.1)
        assert calls == [1]
    
    def test_timer_is_daemon(self):
        trigger = CrashTrigger(delay_seconds=10, terminate=lambda: None)
        trigger.schedule()
        assert trigger._timer.daemon
        trigger._timer.cancel()


class TestTerminate:
    
    @patch('podprobe.crash.os._exit')
    def test_terminate_exits_with_failure_code(self, mock_exit):
        terminate_process()
        mock_exit.assert_called_once_with(CRASH_EXIT_CODE)
        assert CRASH_EXIT_CODE != 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
