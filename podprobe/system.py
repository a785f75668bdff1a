"""
系统信息模块 - 主机名、用户、环境变量、内存与 CPU
"""
import os
import socket
import logging
import platform
from typing import Dict, Mapping, Tuple

import psutil

logger = logging.getLogger(__name__)

# 允许暴露的环境变量，其余一律隐藏
ENV_PREFIXES = ("KUBERNETES_", "OPENSHIFT_", "POD_")
ENV_NAMES = frozenset({"HOSTNAME", "HOME", "PATH", "LOG_LEVEL", "APP_VERSION"})

MB = 1024 * 1024


def get_hostname() -> str:
    """获取主机名，失败时返回 unknown"""
    try:
        return socket.gethostname() or "unknown"
    except OSError as e:
        logger.warning(f"获取主机名失败: {e}")
        return "unknown"


def get_user_id() -> int:
    getter = getattr(os, "geteuid", None)
    return getter() if getter else 0


def get_group_id() -> int:
    getter = getattr(os, "getegid", None)
    return getter() if getter else 0


def is_exposed(name: str) -> bool:
    return name in ENV_NAMES or name.startswith(ENV_PREFIXES)


def filter_environment(environ: Mapping[str, str] = None) -> Dict[str, str]:
    """按白名单过滤环境变量"""
    if environ is None:
        environ = os.environ
    return {k: v for k, v in environ.items() if is_exposed(k)}


def _os_release() -> Tuple[str, str]:
    """读取发行版名称和版本"""
    try:
        info = platform.freedesktop_os_release()
        return info.get("NAME", ""), info.get("VERSION_ID", "")
    except (OSError, AttributeError):
        return platform.system(), platform.version()


def get_memory_bytes() -> Tuple[int, int]:
    """返回 (总内存, 已用内存)，单位字节"""
    try:
        mem = psutil.virtual_memory()
        total = int(mem.total)
        return total, min(int(mem.used), total)
    except Exception as e:
        logger.warning(f"读取内存信息失败: {e}")
        return 0, 0


def get_cpu_count() -> int:
    try:
        return psutil.cpu_count() or 0
    except Exception as e:
        logger.warning(f"读取 CPU 数量失败: {e}")
        return 0


def get_system_snapshot() -> Dict[str, object]:
    """
    实时采集系统快照，不做缓存
    任何一项查询失败都降级为空字符串或 0
    """
    os_name, os_version = _os_release()
    try:
        kernel_version = platform.release()
    except Exception as e:
        logger.warning(f"读取内核版本失败: {e}")
        kernel_version = ""
    
    total, used = get_memory_bytes()
    
    return {
        "os_name": os_name or "",
        "os_version": os_version or "",
        "kernel_version": kernel_version or "",
        "cpu_count": get_cpu_count(),
        "total_memory_mb": total // MB,
        "used_memory_mb": used // MB,
    }
