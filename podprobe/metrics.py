"""
Prometheus 指标模块
"""
from prometheus_client import CollectorRegistry, generate_latest
from prometheus_client.core import GaugeMetricFamily

from .clock import ServiceClock
from .system import get_memory_bytes, get_cpu_count


class AppCollector:
    """每次抓取时实时读取的四个 gauge"""
    
    def __init__(self, clock: ServiceClock):
        self.clock = clock
    
    def collect(self):
        total, used = get_memory_bytes()
        yield GaugeMetricFamily(
            "app_uptime_seconds", "Time since application started",
            value=self.clock.uptime_seconds())
        yield GaugeMetricFamily(
            "app_memory_total_bytes", "Total system memory", value=total)
        yield GaugeMetricFamily(
            "app_memory_used_bytes", "Used system memory", value=used)
        yield GaugeMetricFamily(
            "app_cpu_count", "Number of CPUs available", value=get_cpu_count())


def create_registry(clock: ServiceClock) -> CollectorRegistry:
    """创建独立的注册表，不含默认的进程/GC 指标"""
    registry = CollectorRegistry(auto_describe=True)
    registry.register(AppCollector(clock))
    return registry


def render(registry: CollectorRegistry) -> bytes:
    return generate_latest(registry)

