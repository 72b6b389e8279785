"""
Validate 命令实现

验证配置文件的命令。
"""

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from ...config import validate_config


console = Console()


def validate_command(
    config: str = typer.Option(..., "--config", "-c", help="配置文件路径"),
    json_output: bool = typer.Option(False, "--json", help="输出 JSON 格式的错误信息")
) -> None:
    """验证配置文件

    检查配置文件的语法、必填字段以及服务器 URL 是否重复。

    示例:
        fuel-tools validate -c config.yaml
        fuel-tools validate -c config.yaml --json
    """
    config_path = Path(config)

    if not json_output:
        console.print(f"正在验证配置文件: [cyan]{config_path}[/cyan]")

    errors = validate_config(config_path)

    if not errors:
        if json_output:
            console.print(json.dumps({"file": str(config_path), "errors": [], "error_count": 0}), markup=False, soft_wrap=True)
        else:
            console.print("[green]✓ 配置文件验证通过[/green]")
        return

    if json_output:
        error_data = {
            "file": str(config_path),
            "errors": errors,
            "error_count": len(errors)
        }
        console.print(json.dumps(error_data, ensure_ascii=False, indent=2, default=str), markup=False, soft_wrap=True)
    else:
        console.print(f"[red]配置文件验证失败 ({len(errors)} 个错误):[/red]")
        console.print()

        table = Table(title="验证错误")
        table.add_column("位置", style="cyan", no_wrap=True)
        table.add_column("错误信息", style="red")
        table.add_column("输入值", style="yellow")

        for error in errors:
            location = " -> ".join(str(item) for item in error.get('loc', []))
            message = error.get('msg', '未知错误')
            input_value = str(error.get('input', ''))

            if len(input_value) > 47:
                input_value = input_value[:47] + "..."

            table.add_row(
                location or "根级别",
                message,
                input_value or "-"
            )

        console.print(table)

    raise typer.Exit(1)
