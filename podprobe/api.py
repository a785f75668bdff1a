"""
FastAPI 接口模块 - 探针、容器信息、负载测试、崩溃测试与指标
"""
import logging
from typing import Dict, Optional

from fastapi import Depends, FastAPI, Request, Response
from fastapi.responses import HTMLResponse, PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST
from pydantic import BaseModel

from . import fib as fibonacci
from . import system
from .clock import ServiceClock, utc_timestamp
from .config import Config, get_config
from .crash import CRASH_MESSAGE, CrashTrigger
from .metrics import create_registry, render
from .pages import render_landing
from .readiness import ReadinessGate

logger = logging.getLogger(__name__)


class HealthStatus(BaseModel):
    """探针响应"""
    status: str
    uptime_seconds: int
    timestamp: str


class SystemSnapshot(BaseModel):
    os_name: str = ""
    os_version: str = ""
    kernel_version: str = ""
    cpu_count: int = 0
    total_memory_mb: int = 0
    used_memory_mb: int = 0


class ContainerInfo(BaseModel):
    """容器运行时信息"""
    hostname: str
    user_id: int
    group_id: int
    environment: Dict[str, str]
    system: SystemSnapshot


class FibResult(BaseModel):
    n: int
    result: int
    computation_ms: float


def get_clock(request: Request) -> ServiceClock:
    return request.app.state.clock


def get_readiness(request: Request) -> ReadinessGate:
    return request.app.state.readiness


def get_crash_trigger(request: Request) -> CrashTrigger:
    return request.app.state.crash_trigger


def landing_page(request: Request, clock: ServiceClock = Depends(get_clock)):
    """首页"""
    page = render_landing(
        hostname=system.get_hostname(),
        uptime=clock.uptime_seconds(),
        started_at=clock.started_at.isoformat(timespec="seconds"),
        uid=system.get_user_id(),
        version=request.app.state.config.system.app_version,
    )
    return HTMLResponse(page)


def healthz(clock: ServiceClock = Depends(get_clock)):
    """存活探针"""
    return HealthStatus(status="ok", uptime_seconds=clock.uptime_seconds(), timestamp=utc_timestamp())


def readyz(response: Response,
           clock: ServiceClock = Depends(get_clock),
           readiness: ReadinessGate = Depends(get_readiness)):
    """就绪探针"""
    ready, failed = readiness.evaluate()
    if not ready:
        logger.warning(f"就绪检查未通过: {failed}")
        response.status_code = 503
    return HealthStatus(
        status="ready" if ready else "not_ready",
        uptime_seconds=clock.uptime_seconds(),
        timestamp=utc_timestamp()
    )


def info():
    """容器与系统信息"""
    return ContainerInfo(
        hostname=system.get_hostname(),
        user_id=system.get_user_id(),
        group_id=system.get_group_id(),
        environment=system.filter_environment(),
        system=SystemSnapshot(**system.get_system_snapshot()),
    )


def fib_endpoint(n: Optional[str] = None):
    """CPU 负载测试，同步执行（在线程池中运行）"""
    clamped = fibonacci.normalize_n(n)
    result = fibonacci.compute(clamped)
    logger.debug(f"fib({clamped}) 耗时 {result['computation_ms']:.2f}ms")
    return FibResult(**result)


def crash(trigger: CrashTrigger = Depends(get_crash_trigger)):
    """先返回响应，再延迟崩溃"""
    logger.warning("收到崩溃请求")
    trigger.schedule()
    return PlainTextResponse(CRASH_MESSAGE)


def metrics(request: Request):
    """Prometheus 文本格式指标"""
    body = render(request.app.state.metrics_registry)
    return Response(content=body, media_type=CONTENT_TYPE_LATEST)


def create_app(config: Config = None, clock: ServiceClock = None,
               crash_trigger: CrashTrigger = None,
               readiness: ReadinessGate = None) -> FastAPI:
    """创建并返回 FastAPI 应用，启动时钟在此初始化一次"""
    if config is None:
        config = get_config()
    if clock is None:
        clock = ServiceClock()
    
    app = FastAPI(
        title="podprobe",
        description="容器平台运维行为演示服务",
        version=config.system.app_version
    )
    app.state.config = config
    app.state.clock = clock
    app.state.crash_trigger = crash_trigger or CrashTrigger()
    app.state.readiness = readiness or ReadinessGate()
    app.state.metrics_registry = create_registry(clock)
    
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        response = await call_next(request)
        logger.debug(f"{request.method} {request.url.path} -> {response.status_code}")
        return response
    
    app.add_api_route("/", landing_page, methods=["GET"], response_class=HTMLResponse)
    app.add_api_route("/healthz", healthz, methods=["GET"], response_model=HealthStatus)
    app.add_api_route("/readyz", readyz, methods=["GET"], response_model=HealthStatus)
    app.add_api_route("/info", info, methods=["GET"], response_model=ContainerInfo)
    app.add_api_route("/fib", fib_endpoint, methods=["GET"], response_model=FibResult)
    app.add_api_route("/crash", crash, methods=["GET"], response_class=PlainTextResponse)
    app.add_api_route("/metrics", metrics, methods=["GET"])
    
    return app
