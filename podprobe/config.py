"""
配置加载模块
"""
import os
import logging
import yaml
from pathlib import Path
from typing import Optional
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8080


@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT


@dataclass
class SystemConfig:
    log_level: str = "INFO"
    log_file: Optional[str] = None
    app_version: str = "1.0.0"


def parse_port(value, default: int = DEFAULT_PORT) -> int:
    """解析端口号，非法值回退到默认端口"""
    try:
        port = int(str(value).strip())
    except (TypeError, ValueError):
        return default
    if not 0 < port < 65536:
        return default
    return port


class Config:
    """全局配置类"""
    
    def __init__(self, config_dir: str = None):
        if config_dir is None:
            # 默认配置目录
            config_dir = Path(__file__).parent.parent / "config"
        
        self.config_dir = Path(config_dir)
        self.server = ServerConfig()
        self.system = SystemConfig()
        
        self._load_config()
        self._apply_env()
    
    def _load_config(self):
        """加载主配置文件"""
        config_file = self.config_dir / "config.yml"
        if not config_file.exists():
            logger.warning(f"配置文件不存在 {config_file}，使用默认配置")
            return
        
        with open(config_file, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
        
        # 服务配置
        server_cfg = data.get('server', {}) or {}
        self.server.host = server_cfg.get('host', '0.0.0.0')
        self.server.port = parse_port(self._resolve_env(server_cfg.get('port', DEFAULT_PORT)))
        
        # 系统配置
        sys_cfg = data.get('system', {}) or {}
        self.system.log_level = sys_cfg.get('log_level', 'INFO')
        self.system.log_file = sys_cfg.get('log_file') or None
        self.system.app_version = str(self._resolve_env(sys_cfg.get('app_version', '1.0.0')) or '1.0.0')
    
    def _apply_env(self):
        """PORT 环境变量优先于配置文件"""
        raw_port = os.environ.get('PORT')
        if raw_port is not None:
            self.server.port = parse_port(raw_port)
    
    def _resolve_env(self, value):
        """解析环境变量 ${VAR_NAME}"""
        if not value or not isinstance(value, str):
            return value
        
        if value.startswith('${') and value.endswith('}'):
            env_name = value[2:-1]
            return os.environ.get(env_name, '')
        
        return value


# 全局配置实例
_config: Config = None


def get_config() -> Config:
    """获取全局配置"""
    global _config
    if _config is None:
        _config = Config()
    return _config


def init_config(config_dir: str = None):
    """初始化配置"""
    global _config
    _config = Config(config_dir)
    return _config
