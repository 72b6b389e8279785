"""
配置文本输出

将 ServerConfig / ClientConfig 渲染为纯文本或带 ANSI 颜色的文本。
彩色输出的标签为粗体亮青色，值为白色；空值字段不输出。
"""

from typing import Any, List, Tuple

from rich.color import Color, ColorSystem
from rich.style import Style

LABEL_COLOR = Color.parse("bright_cyan")
VALUE_STYLE = Style.parse("white")

BOLD = "\x1b[1m"
RESET = "\x1b[0m"

# 服务器条目之间的分隔行
SERVER_SEPARATOR = "---"
INDENT = "  "


def _server_fields(server: Any) -> List[Tuple[str, str]]:
    return [
        ("URL", server.url.str()),
        ("Version", server.version),
        ("API key", server.api_key),
    ]


def _client_fields(client: Any) -> List[Tuple[str, str]]:
    return [
        ("Config path", client.config_path),
        ("Cache location", client.cache_location),
    ]


def _ansi(text: str, style: Style) -> str:
    # 固定使用 16 色，输出不依赖终端检测
    return style.render(text, color_system=ColorSystem.STANDARD)


def _label(text: str) -> str:
    # 颜色与粗体分成两个转义序列: ESC[96m ESC[1m
    codes = ";".join(LABEL_COLOR.downgrade(ColorSystem.STANDARD).get_ansi_codes())
    return f"\x1b[{codes}m{BOLD}{text}{RESET}"


def _pretty_line(prefix: str, label: str, value: str = "") -> str:
    if not value:
        return f"{prefix}{_label(label + ':')}\n"
    return f"{prefix}{_label(label + ': ')}{_ansi(value, VALUE_STYLE)}\n"


def server_as_string(server: Any, prefix: str = "") -> str:
    """服务器配置的纯文本形式"""
    return "".join(f"{prefix}{label}: {value}\n" for label, value in _server_fields(server))


def server_as_pretty_string(server: Any, prefix: str = "") -> str:
    """服务器配置的彩色形式，空值字段被省略"""
    return "".join(
        _pretty_line(prefix, label, value)
        for label, value in _server_fields(server)
        if value
    )


def client_as_string(client: Any, prefix: str = "") -> str:
    """客户端配置的纯文本形式"""
    out = "".join(f"{prefix}{label}: {value}\n" for label, value in _client_fields(client))
    out += f"{prefix}Servers:\n"
    for server in client.servers:
        out += f"{prefix}{INDENT}{SERVER_SEPARATOR}\n"
        out += server_as_string(server, prefix + INDENT)
    return out


def client_as_pretty_string(client: Any, prefix: str = "") -> str:
    """客户端配置的彩色形式"""
    out = "".join(
        _pretty_line(prefix, label, value)
        for label, value in _client_fields(client)
        if value
    )
    out += _pretty_line(prefix, "Servers")
    for server in client.servers:
        out += f"{prefix}{INDENT}{SERVER_SEPARATOR}\n"
        out += server_as_pretty_string(server, prefix + INDENT)
    return out
