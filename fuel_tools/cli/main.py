"""
Fuel Tools CLI 主入口

提供命令行接口，支持 show/validate/init 等命令。
"""

from typing import Optional

import typer
from rich.console import Console

from .. import __version__
from ..utils import configure_logging
from .commands import show, validate, init


# 创建主应用
app = typer.Typer(
    name="fuel-tools",
    help="Fuel Tools - Fuel 资源服务器客户端配置工具",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

# 控制台输出
console = Console()


def version_callback(value: bool) -> None:
    """显示版本信息"""
    if value:
        console.print(f"Fuel Tools v{__version__}")
        raise typer.Exit()


def verbose_callback(verbose: bool) -> None:
    """配置详细输出"""
    configure_logging(level="DEBUG" if verbose else "INFO")


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="显示版本信息"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        callback=verbose_callback,
        help="启用详细输出"
    )
) -> None:
    """Fuel Tools - Fuel 资源服务器客户端配置工具

    使用 --help 查看可用命令的详细信息。
    """
    pass


# 注册子命令
app.command("show", help="显示客户端配置")(show.show_command)
app.command("validate", help="验证配置文件")(validate.validate_command)
app.command("init", help="生成初始配置文件")(init.init_command)


if __name__ == "__main__":
    app()
