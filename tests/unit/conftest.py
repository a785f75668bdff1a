#!/usr/bin/env python3
"""
pytest 配置文件

提供共享的 fixtures 和配置
"""
import sys
import threading
import pytest
from pathlib import Path

# 添加项目路径
sys.path.insert(0, str(Path(__file__).parent.parent.parent))


@pytest.fixture(autouse=True)
def reset_config():
    """每个测试前重置配置"""
    import podprobe.config as config_module
    config_module._config = None
    yield
    config_module._config = None


@pytest.fixture
def crash_fired():
    """替代真实退出的事件"""
    return threading.Event()


@pytest.fixture
def app(crash_fired):
    """不会真正退出进程的应用实例"""
    from podprobe.api import create_app
    from podprobe.config import init_config
    from podprobe.crash import CrashTrigger
    
    trigger = CrashTrigger(terminate=crash_fired.set)
    return create_app(init_config(), crash_trigger=trigger)


@pytest.fixture
def client(app):
    from fastapi.testclient import TestClient
    with TestClient(app) as c:
        yield c
