"""
客户端配置

ServerConfig 描述单个 Fuel 服务器（地址、协议版本、API 密钥），
ClientConfig 描述客户端整体配置（配置文件路径、缓存目录、服务器列表、User-Agent）。

这些对象没有内部同步，并发修改需要调用方自行串行化。
"""

from pathlib import Path
from typing import List, Optional, Union

from .. import PRODUCT_NAME, __version__
from ..utils.logging import commit_logger, load_logger
from ..utils.paths import join_paths, home_path
from ..utils.uri import URI, canonical_url
from . import serializer
from .loader import ConfigError, ConfigLoader, config_loader


class ServerConfig:
    """单个服务器的配置"""

    DEFAULT_VERSION = "1.0"

    def __init__(self, url: Union[str, URI, None] = None, version: Optional[str] = None,
                 api_key: str = ""):
        self._url = URI()
        self._version = version or self.DEFAULT_VERSION
        self._api_key = api_key
        if url is not None:
            self.set_url(url)

    @property
    def url(self) -> URI:
        """服务器地址（规范形式）；未设置或无效时 str() 为空"""
        return self._url

    @url.setter
    def url(self, value: Union[str, URI]) -> None:
        self._url = canonical_url(value)

    def set_url(self, url: Union[str, URI]) -> None:
        self.url = url

    @property
    def version(self) -> str:
        return self._version

    @version.setter
    def version(self, value: str) -> None:
        self._version = value

    def set_version(self, version: str) -> None:
        self.version = version

    @property
    def api_key(self) -> str:
        return self._api_key

    @api_key.setter
    def api_key(self, value: str) -> None:
        self._api_key = value

    def set_api_key(self, api_key: str) -> None:
        self.api_key = api_key

    def as_string(self, prefix: str = "") -> str:
        return serializer.server_as_string(self, prefix)

    def as_pretty_string(self, prefix: str = "") -> str:
        return serializer.server_as_pretty_string(self, prefix)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ServerConfig):
            return NotImplemented
        return (self._url == other._url
                and self._version == other._version
                and self._api_key == other._api_key)

    def __repr__(self) -> str:
        return f"ServerConfig(url={self._url.str()!r}, version={self._version!r})"

    def __str__(self) -> str:
        return self.as_string()


class ClientConfig:
    """Fuel 客户端配置

    默认构造时没有服务器，配置文件路径与缓存目录均为空。
    """

    def __init__(self, loader: Optional[ConfigLoader] = None):
        self._config_path = ""
        self._cache_location = ""
        self._servers: List[ServerConfig] = []
        self._user_agent = default_user_agent()
        self._loader = loader or config_loader

    @staticmethod
    def default_cache_location() -> str:
        """默认缓存目录: <home>/.ignition/fuel"""
        return join_paths(home_path(), ".ignition", "fuel")

    @staticmethod
    def default_config_path() -> str:
        """用户配置文件路径: <home>/.ignition/fuel/config.yaml"""
        return join_paths(ClientConfig.default_cache_location(), "config.yaml")

    @property
    def config_path(self) -> str:
        return self._config_path

    @config_path.setter
    def config_path(self, value: Union[str, Path]) -> None:
        self._config_path = str(value)

    def set_config_path(self, path: Union[str, Path]) -> None:
        self.config_path = path

    @property
    def cache_location(self) -> str:
        return self._cache_location

    @cache_location.setter
    def cache_location(self, value: Union[str, Path]) -> None:
        self._cache_location = str(value)

    def set_cache_location(self, path: Union[str, Path]) -> None:
        self.cache_location = path

    @property
    def servers(self) -> List[ServerConfig]:
        """服务器列表（按添加顺序）的副本"""
        return list(self._servers)

    def add_server(self, server: ServerConfig) -> None:
        """追加服务器，不检查重复"""
        self._servers.append(server)

    @property
    def user_agent(self) -> str:
        return self._user_agent

    @user_agent.setter
    def user_agent(self, value: str) -> None:
        self._user_agent = value

    def set_user_agent(self, user_agent: str) -> None:
        self.user_agent = user_agent

    def load_config(self) -> bool:
        """从 config_path 加载配置

        config_path 为空时使用用户配置文件，若该文件不存在则先写入内置初始配置。
        任何错误都只通过返回值体现；失败时当前配置保持不变。

        Returns:
            bool: 加载成功返回 True
        """
        path = self._config_path

        try:
            if not path:
                if not home_path():
                    raise ConfigError("无法确定用户主目录，请显式指定配置文件路径")
                path = self.default_config_path()
                try:
                    missing = not Path(path).exists()
                except (OSError, ValueError) as e:
                    raise ConfigError(f"无法访问配置路径: {e}")
                if missing:
                    self._loader.install_default(path)
                    load_logger.info(f"已创建初始配置文件: {path}")

            load_logger.debug(f"加载配置文件: {path}")
            candidate = self._loader.load_from_file(path)
        except ConfigError as e:
            load_logger.error(f"加载配置文件失败 [{path or '(未指定)'}]: {e}")
            return False

        servers = [
            ServerConfig(url=entry.url, version=entry.version, api_key=entry.api_key or "")
            for entry in candidate.servers
        ]

        # 全部检查通过后一次性提交
        self._servers = servers
        if candidate.cache is not None:
            self._cache_location = candidate.cache.path
        self._config_path = str(path)

        commit_logger.debug(
            f"配置已提交: {len(servers)} 个服务器, 缓存目录 {self._cache_location or '(未设置)'}"
        )
        return True

    def save_config(self, path: Union[str, Path, None] = None) -> None:
        """将当前配置写入 YAML 文件（默认写回 config_path）

        Raises:
            ConfigError: 路径为空或写入失败
        """
        path = path or self._config_path
        if not path:
            raise ConfigError("未指定配置文件路径")
        self._loader.save_to_file(self, path)

    def as_string(self, prefix: str = "") -> str:
        return serializer.client_as_string(self, prefix)

    def as_pretty_string(self, prefix: str = "") -> str:
        return serializer.client_as_pretty_string(self, prefix)

    def __repr__(self) -> str:
        return (f"ClientConfig(config_path={self._config_path!r}, "
                f"cache_location={self._cache_location!r}, servers={len(self._servers)})")

    def __str__(self) -> str:
        return self.as_string()


def default_user_agent() -> str:
    """默认 User-Agent: <ProductName>-<version>"""
    return f"{PRODUCT_NAME}-{__version__}"
