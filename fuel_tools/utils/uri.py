"""
URI 工具

提供服务器地址使用的 URI / URIPath 值类型。
格式: <scheme>://<path>[?query][#fragment]，其中 path 包含主机与端口部分。
"""

from __future__ import annotations

import re
from typing import List, Union

SCHEME_DELIMITER = "://"

_SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")


class URIPath:
    """URI 路径部分

    以 "/" 分段保存，空段会被忽略（因此结尾的 "/" 不会保留）。
    以 "/" 开头的路径为绝对路径。
    """

    def __init__(self, path: Union[str, "URIPath", None] = None):
        self._parts: List[str] = []
        self._absolute = False

        if isinstance(path, URIPath):
            self._parts = list(path._parts)
            self._absolute = path._absolute
        elif path:
            self.parse(path)

    def parse(self, path: str) -> None:
        """解析路径字符串，替换当前内容"""
        self._absolute = path.startswith("/")
        self._parts = [part for part in path.split("/") if part]

    @property
    def parts(self) -> List[str]:
        return list(self._parts)

    def is_absolute(self) -> bool:
        return self._absolute

    def set_absolute(self, absolute: bool = True) -> None:
        self._absolute = absolute

    def push_back(self, part: str) -> None:
        """在末尾追加路径段（段内的 "/" 会被拆分）"""
        self._parts.extend(p for p in part.split("/") if p)

    def clear(self) -> None:
        self._parts = []
        self._absolute = False

    def str(self) -> str:
        text = "/".join(self._parts)
        if self._absolute:
            text = "/" + text
        return text

    def __truediv__(self, part: str) -> "URIPath":
        result = URIPath(self)
        result.push_back(part)
        return result

    def __eq__(self, other: object) -> bool:
        if isinstance(other, URIPath):
            return self.str() == other.str()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.str())

    def __str__(self) -> str:
        return self.str()

    def __repr__(self) -> str:
        return f"URIPath({self.str()!r})"


class URI:
    """统一资源标识符

    无法识别 scheme 的字符串会得到一个空 URI，其 str() 为空字符串。
    """

    def __init__(self, text: Union[str, "URI", None] = None):
        self._scheme = ""
        self._path = URIPath()
        self._query = ""
        self._fragment = ""

        if isinstance(text, URI):
            self._scheme = text._scheme
            self._path = URIPath(text._path)
            self._query = text._query
            self._fragment = text._fragment
        elif text:
            self.parse(text)

    @staticmethod
    def is_valid_string(text: str) -> bool:
        """检查字符串是否带有合法的 scheme"""
        scheme, sep, _ = text.partition(SCHEME_DELIMITER)
        return bool(sep) and bool(_SCHEME_PATTERN.match(scheme))

    def parse(self, text: str) -> bool:
        """解析字符串

        Returns:
            bool: 解析成功返回 True；失败时 URI 被清空
        """
        self.clear()
        text = text.strip()
        if not self.is_valid_string(text):
            return False

        scheme, _, rest = text.partition(SCHEME_DELIMITER)
        rest, _, fragment = rest.partition("#")
        rest, _, query = rest.partition("?")

        self._scheme = scheme
        self._path = URIPath(rest)
        self._query = query
        self._fragment = fragment
        return True

    def clear(self) -> None:
        self._scheme = ""
        self._path = URIPath()
        self._query = ""
        self._fragment = ""

    def scheme(self) -> str:
        return self._scheme

    def set_scheme(self, scheme: str) -> None:
        self._scheme = scheme

    def path(self) -> URIPath:
        """返回可修改的路径对象"""
        return self._path

    def set_path(self, path: Union[str, URIPath]) -> None:
        self._path = URIPath(path)

    def query(self) -> str:
        return self._query

    def set_query(self, query: str) -> None:
        self._query = query.lstrip("?")

    def fragment(self) -> str:
        return self._fragment

    def set_fragment(self, fragment: str) -> None:
        self._fragment = fragment.lstrip("#")

    def valid(self) -> bool:
        return bool(self._scheme)

    def str(self) -> str:
        if not self._scheme:
            return ""

        text = f"{self._scheme}{SCHEME_DELIMITER}{self._path.str()}"
        if self._query:
            text += f"?{self._query}"
        if self._fragment:
            text += f"#{self._fragment}"
        return text

    def __eq__(self, other: object) -> bool:
        if isinstance(other, URI):
            return self.str() == other.str()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.str())

    def __str__(self) -> str:
        return self.str()

    def __repr__(self) -> str:
        return f"URI({self.str()!r})"


def canonical_url(uri: Union[str, URI, None]) -> URI:
    """返回 URI 的规范形式

    去掉一个结尾的路径分隔符；没有合法 scheme 的输入得到空 URI。
    """
    text = URI(uri).str()
    if text.endswith("/"):
        text = text[:-1]
    return URI(text)
