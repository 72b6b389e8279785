"""
Fuel Tools - Fuel 资源服务器客户端配置

Client configuration for Fuel asset servers.
"""

__version__ = "1.0.0"
__license__ = "Apache-2.0"

# 用于默认 User-Agent
PRODUCT_NAME = "IgnitionFuelTools"

# 导出主要 API
from .config import ClientConfig, ServerConfig, ConfigError
from .utils.uri import URI, URIPath

__all__ = ["ClientConfig", "ServerConfig", "ConfigError", "URI", "URIPath", "PRODUCT_NAME", "__version__"]
