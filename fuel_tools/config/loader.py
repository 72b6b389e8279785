"""
配置加载器

负责从 YAML 文件加载 Fuel 客户端配置并进行验证。
加载器只产生候选配置（FuelConfigFile），不会修改任何 ClientConfig。
"""

import json
import shutil
from pathlib import Path
from typing import Any, Dict, List, Union

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ..utils.logging import parse_logger, validate_logger
from ..utils.paths import ensure_directory
from .schema import FuelConfigFile

# 内置初始配置
DEFAULT_CONFIG_PATH = Path(__file__).parent / "default_config.yaml"


class ConfigError(Exception):
    """配置错误基类"""
    pass


class ConfigValidationError(ConfigError):
    """配置验证错误"""

    def __init__(self, message: str, errors: List[Dict[str, Any]]):
        super().__init__(message)
        self.errors = errors

    def format_errors(self) -> str:
        """格式化错误信息为人类可读的格式"""
        formatted = []
        for error in self.errors:
            loc = " -> ".join(str(item) for item in error.get('loc', []))
            msg = error.get('msg', '未知错误')
            input_val = error.get('input', '')

            if loc:
                formatted.append(f"字段 '{loc}': {msg}")
                if input_val:
                    formatted.append(f"  输入值: {input_val}")
            else:
                formatted.append(f"根级别: {msg}")

        return "\n".join(formatted)

    def format_errors_json(self) -> str:
        """格式化错误信息为 JSON 格式"""
        return json.dumps(self.errors, ensure_ascii=False, indent=2, default=str)

    def __str__(self) -> str:
        details = self.format_errors()
        if details:
            return f"{self.args[0]}\n{details}"
        return self.args[0]


def _simplify_errors(exc: ValidationError) -> List[Dict[str, Any]]:
    """只保留 loc / msg / type / input，便于输出与 JSON 序列化"""
    errors = []
    for error in exc.errors():
        item = {
            'loc': list(error.get('loc', ())),
            'msg': error.get('msg', ''),
            'type': error.get('type', ''),
        }
        if error.get('input') is not None and not isinstance(error.get('input'), dict):
            item['input'] = error['input']
        errors.append(item)
    return errors


class ConfigLoader:
    """配置加载器"""

    def __init__(self):
        self.yaml = YAML()
        self.yaml.preserve_quotes = True
        self.yaml.width = 4096  # 避免长行自动换行

    def read_document(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """读取并解析 YAML 文档

        Raises:
            ConfigError: 文件不存在、无法读取、语法错误或根级别不是映射
        """
        config_path = Path(config_path)

        try:
            exists = config_path.exists()
            is_file = exists and config_path.is_file()
        except (OSError, ValueError) as e:
            # 路径过长、无权限访问上级目录等
            raise ConfigError(f"无法访问配置路径: {e}")

        if not exists:
            raise ConfigError(f"配置文件不存在: {config_path}")

        if not is_file:
            raise ConfigError(f"配置路径不是文件: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                raw_data = self.yaml.load(f)
        except YAMLError as e:
            raise ConfigError(f"YAML 解析错误: {e}")
        except RecursionError:
            raise ConfigError("YAML 解析错误: 文档嵌套层级过深")
        except (OSError, UnicodeDecodeError, ValueError) as e:
            raise ConfigError(f"文件读取错误: {e}")

        if raw_data is None:
            raise ConfigError("配置文件为空")

        if not isinstance(raw_data, dict):
            raise ConfigError("配置文件根级别必须是对象/字典格式")

        parse_logger.debug(f"已解析配置文件: {config_path}")
        return raw_data

    def load_from_file(self, config_path: Union[str, Path]) -> FuelConfigFile:
        """从文件加载配置

        Args:
            config_path: 配置文件路径

        Returns:
            FuelConfigFile: 验证后的候选配置

        Raises:
            ConfigError: 配置加载或验证错误
        """
        raw_data = self.read_document(config_path)
        return self.load_from_dict(raw_data)

    def load_from_dict(self, data: Dict[str, Any]) -> FuelConfigFile:
        """从字典加载配置

        Raises:
            ConfigValidationError: 配置验证错误
        """
        try:
            config = FuelConfigFile.from_dict(data)
        except ValidationError as e:
            raise ConfigValidationError("配置验证失败", _simplify_errors(e))

        validate_logger.debug(
            f"配置验证通过: {len(config.servers)} 个服务器, "
            f"cache={'已设置' if config.cache else '未设置'}"
        )
        return config

    def save_to_file(self, client: Any, output_path: Union[str, Path]) -> None:
        """保存 ClientConfig 到文件

        Raises:
            ConfigError: 保存错误
        """
        output_path = Path(output_path)

        try:
            data = FuelConfigFile.from_client(client).to_dict()
        except ValidationError as e:
            raise ConfigValidationError("配置验证失败", _simplify_errors(e))

        try:
            ensure_directory(output_path.parent)
            with open(output_path, 'w', encoding='utf-8') as f:
                f.write("---\n")
                self.yaml.dump(data, f)
        except OSError as e:
            raise ConfigError(f"保存配置文件失败: {e}")

    def install_default(self, output_path: Union[str, Path], overwrite: bool = False) -> Path:
        """将内置初始配置复制到指定位置

        Returns:
            Path: 配置文件路径

        Raises:
            ConfigError: 目标已存在（且未允许覆盖）或写入失败
        """
        output_path = Path(output_path)

        try:
            if output_path.exists() and not overwrite:
                raise ConfigError(f"配置文件已存在: {output_path}")
            ensure_directory(output_path.parent)
            shutil.copyfile(DEFAULT_CONFIG_PATH, output_path)
        except OSError as e:
            raise ConfigError(f"写入初始配置失败: {e}")

        return output_path

    def validate_file(self, config_path: Union[str, Path]) -> List[Dict[str, Any]]:
        """验证配置文件并返回错误列表

        Returns:
            List[Dict]: 错误列表，空列表表示验证通过
        """
        try:
            self.load_from_file(config_path)
            return []
        except ConfigValidationError as e:
            return e.errors
        except ConfigError as e:
            return [{
                'loc': [],
                'msg': str(e),
                'type': 'config_error'
            }]


# 全局加载器实例
config_loader = ConfigLoader()


def load_config(config_path: Union[str, Path]) -> FuelConfigFile:
    """便捷函数：加载配置文件"""
    return config_loader.load_from_file(config_path)


def validate_config(config_path: Union[str, Path]) -> List[Dict[str, Any]]:
    """便捷函数：验证配置文件"""
    return config_loader.validate_file(config_path)


def save_config(client: Any, output_path: Union[str, Path]) -> None:
    """便捷函数：保存配置文件"""
    config_loader.save_to_file(client, output_path)
