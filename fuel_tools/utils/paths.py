"""
路径工具

提供主目录查找、路径拼接等路径处理相关的工具函数。
"""

import os
from pathlib import Path
from typing import Union


def home_path() -> str:
    """获取用户主目录

    POSIX 使用 HOME，Windows 使用 HOMEPATH。

    Returns:
        str: 主目录，未设置时返回空字符串
    """
    variable = "HOMEPATH" if os.name == "nt" else "HOME"
    return os.environ.get(variable, "")


def join_paths(*parts: Union[str, Path]) -> str:
    """拼接路径，忽略空的部分

    Args:
        *parts: 路径部分

    Returns:
        str: 拼接后的路径
    """
    parts = [str(part) for part in parts if str(part)]
    if not parts:
        return ""
    return os.path.join(*parts)


def expand_path(path: Union[str, Path]) -> str:
    """扩展路径（处理环境变量和用户目录）

    与 os.path.expanduser 不同，"~" 通过 home_path() 解析，
    保证与默认缓存目录的计算方式一致。不会将相对路径转换为绝对路径。

    Args:
        path: 原始路径

    Returns:
        str: 扩展后的路径
    """
    path = os.path.expandvars(str(path))

    if path == "~":
        return home_path()

    if path.startswith("~/") or path.startswith("~\\"):
        rest = path[2:].replace("\\", "/")
        return join_paths(home_path(), *rest.split("/"))

    return path


def ensure_directory(path: Union[str, Path]) -> Path:
    """确保目录存在

    Args:
        path: 目录路径

    Returns:
        Path: 目录路径
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path
