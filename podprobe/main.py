"""
podprobe - 主入口
"""
import sys
import signal
import logging
import argparse
from pathlib import Path

import uvicorn

from .config import init_config, parse_port
from .api import create_app

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def normalize_log_level(value) -> str:
    """未知日志级别回退到 INFO"""
    level = str(value or "").strip().upper()
    if level == "WARN":
        level = "WARNING"
    return level if level in LOG_LEVELS else "INFO"


def setup_logging(log_level: str = "INFO", log_file: str = None):
    """配置日志"""
    level = getattr(logging, log_level.upper(), logging.INFO)
    
    handlers = [logging.StreamHandler(sys.stdout)]
    
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))
    
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='podprobe - 容器平台探针与故障演示服务')
    parser.add_argument('--config-dir', type=str, help='配置文件目录')
    parser.add_argument('--host', type=str, default=None, help='监听地址')
    parser.add_argument('--port', type=str, default=None, help='监听端口（默认读取 PORT 环境变量）')
    parser.add_argument('--log-level', type=str, default=None, help='日志级别')
    return parser


def main(argv=None):
    """主入口函数"""
    args = build_parser().parse_args(argv)
    
    config = init_config(args.config_dir)
    if args.host:
        config.server.host = args.host
    if args.port is not None:
        config.server.port = parse_port(args.port)
    log_level = normalize_log_level(args.log_level or config.system.log_level)
    
    setup_logging(log_level=log_level, log_file=config.system.log_file)
    
    logger = logging.getLogger(__name__)
    
    def signal_handler(signum, frame):
        logger.info("收到退出信号，正在关闭...")
        sys.exit(0)
    
    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)
    
    # 时钟在 create_app 中初始化，早于监听端口
    app = create_app(config)
    
    logger.info(f"podprobe 监听 http://{config.server.host}:{config.server.port}")
    
    uvicorn.run(
        app,
        host=config.server.host,
        port=config.server.port,
        log_level=log_level.lower()
    )


if __name__ == "__main__":
    main()
