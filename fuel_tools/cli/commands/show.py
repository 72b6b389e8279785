"""
Show 命令实现

加载并显示客户端配置。
"""

import json
import sys
from typing import Optional

import typer
from rich.console import Console

from ...config import ClientConfig


console = Console(highlight=False)


def show_command(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="配置文件路径（默认使用用户配置文件）"),
    plain: bool = typer.Option(False, "--plain", help="输出无颜色的纯文本"),
    json_output: bool = typer.Option(False, "--json", help="输出 JSON 格式")
) -> None:
    """显示客户端配置

    示例:
        fuel-tools show
        fuel-tools show -c config.yaml --plain
        fuel-tools show -c config.yaml --json
    """
    client = ClientConfig()
    if config:
        client.set_config_path(config)

    if not client.load_config():
        console.print(f"[red]无法加载配置文件: {client.config_path or ClientConfig.default_config_path()}[/red]")
        raise typer.Exit(1)

    if json_output:
        data = {
            "config_path": client.config_path,
            "cache_location": client.cache_location,
            "user_agent": client.user_agent,
            "servers": [
                {
                    "url": server.url.str(),
                    "version": server.version,
                    "api_key": server.api_key,
                }
                for server in client.servers
            ],
        }
        console.print(json.dumps(data, ensure_ascii=False, indent=2), markup=False, soft_wrap=True)
    elif plain:
        sys.stdout.write(client.as_string())
    else:
        # 已包含 ANSI 转义序列，直接写出
        sys.stdout.write(client.as_pretty_string())
