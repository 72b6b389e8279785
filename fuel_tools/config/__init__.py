"""配置模块

提供 Fuel 客户端配置的数据模型、YAML 配置文件的加载、验证和保存，以及文本输出。
"""

from .schema import FuelConfigFile, ServerModel, CacheModel
from .loader import (
    ConfigLoader,
    ConfigValidationError,
    ConfigError,
    DEFAULT_CONFIG_PATH,
    load_config,
    validate_config,
    save_config,
    config_loader
)
from .client_config import ClientConfig, ServerConfig, default_user_agent

__all__ = [
    # 主要类
    "ClientConfig",
    "ServerConfig",
    "FuelConfigFile",
    "ServerModel",
    "CacheModel",
    "ConfigLoader",

    # 异常类
    "ConfigError",
    "ConfigValidationError",

    # 便捷函数
    "load_config",
    "validate_config",
    "save_config",
    "default_user_agent",

    # 常量与单例
    "DEFAULT_CONFIG_PATH",
    "config_loader",
]
