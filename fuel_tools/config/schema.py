"""
配置 Schema 定义

使用 Pydantic 定义 Fuel 客户端 YAML 配置文件的模型。
模型实例只是校验后的候选状态，由 ClientConfig 一次性提交。
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from ..utils.paths import expand_path
from ..utils.uri import canonical_url


class ServerModel(BaseModel):
    """服务器条目模型"""
    url: str = Field(..., description="服务器地址", min_length=1)
    version: Optional[str] = Field(None, description="协议版本")
    api_key: Optional[str] = Field(None, description="API 密钥")

    model_config = {
        "extra": "ignore",  # 允许 name 等附加字段
        "str_strip_whitespace": True,
    }

    @field_validator('version', 'api_key', mode='before')
    @classmethod
    def coerce_scalar(cls, v: Any) -> Any:
        """YAML 中的数字标量（如 version: 2.0）按字符串处理"""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator('url')
    @classmethod
    def validate_url(cls, v: str) -> str:
        """规范化服务器地址"""
        canonical = canonical_url(v).str()
        if not canonical:
            raise ValueError("服务器 URL 无效，必须包含 scheme（例如 https://）")
        return canonical


class CacheModel(BaseModel):
    """缓存配置模型"""
    path: str = Field(..., description="资源缓存目录", min_length=1)

    model_config = {
        "extra": "ignore",
        "str_strip_whitespace": True,
    }

    @field_validator('path')
    @classmethod
    def validate_path(cls, v: str) -> str:
        """展开 ~ 与环境变量"""
        expanded = expand_path(v)
        if not expanded:
            raise ValueError("缓存路径不能为空")
        return expanded


class FuelConfigFile(BaseModel):
    """Fuel 客户端配置文件根模型

    servers 与 cache 均为可选；未声明 cache 时 cache 为 None。
    """
    servers: List[ServerModel] = Field(default_factory=list, description="服务器列表")
    cache: Optional[CacheModel] = Field(None, description="缓存配置")

    model_config = {
        "extra": "ignore",
    }

    @model_validator(mode='before')
    @classmethod
    def check_sections(cls, data: Any) -> Any:
        """区分"未声明"与"声明为空"的配置段"""
        if not isinstance(data, dict):
            return data

        data = dict(data)
        if 'servers' in data and data['servers'] is None:
            data['servers'] = []
        if 'cache' in data and data['cache'] is None:
            raise ValueError("cache 配置段必须包含 path")
        return data

    @model_validator(mode='after')
    def validate_unique_urls(self) -> 'FuelConfigFile':
        """同一配置文件中服务器 URL 不能重复"""
        seen = set()
        for server in self.servers:
            if server.url in seen:
                raise ValueError(f"服务器 URL 重复: {server.url}")
            seen.add(server.url)
        return self

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典格式"""
        return self.model_dump(exclude_none=True)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FuelConfigFile':
        """从字典创建配置实例"""
        return cls.model_validate(data)

    @classmethod
    def from_client(cls, client: Any) -> 'FuelConfigFile':
        """从 ClientConfig 创建配置实例

        版本为默认值、API 密钥为空的字段不会写出。
        """
        servers = []
        for server in client.servers:
            entry: Dict[str, Any] = {'url': server.url.str()}
            if server.version and server.version != server.DEFAULT_VERSION:
                entry['version'] = server.version
            if server.api_key:
                entry['api_key'] = server.api_key
            servers.append(entry)

        data: Dict[str, Any] = {'servers': servers}
        if client.cache_location:
            data['cache'] = {'path': client.cache_location}
        return cls.model_validate(data)
