"""
Init 命令实现

写出内置初始配置文件。
"""

from typing import Optional

import typer
from rich.console import Console

from ...config import ClientConfig, ConfigError, config_loader


console = Console()


def init_command(
    output: Optional[str] = typer.Option(
        None,
        "--output", "-o",
        help="输出配置文件路径（默认 ~/.ignition/fuel/config.yaml）"
    ),
    force: bool = typer.Option(False, "--force", "-f", help="覆盖已存在的文件")
) -> None:
    """生成初始配置文件

    示例:
        fuel-tools init
        fuel-tools init -o ./fuel.yaml --force
    """
    output_path = output or ClientConfig.default_config_path()

    try:
        written = config_loader.install_default(output_path, overwrite=force)
    except ConfigError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    console.print(f"✓ 初始配置文件已生成: [green]{written}[/green]")
    console.print("查看配置:")
    console.print(f"  [cyan]fuel-tools show -c {written}[/cyan]")
