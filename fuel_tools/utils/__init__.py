"""通用工具模块"""

from .logging import (
    configure_logging,
    get_stage_logger,
    set_log_level,
    StageLogger,
    LogStage,
    # 预定义日志器
    load_logger,
    parse_logger,
    validate_logger,
    commit_logger,
)

from .paths import (
    home_path,
    join_paths,
    expand_path,
    ensure_directory,
)

from .uri import URI, URIPath, canonical_url

__all__ = [
    # 日志相关
    "configure_logging",
    "get_stage_logger",
    "set_log_level",
    "StageLogger",
    "LogStage",
    "load_logger",
    "parse_logger",
    "validate_logger",
    "commit_logger",

    # 路径相关
    "home_path",
    "join_paths",
    "expand_path",
    "ensure_directory",

    # URI
    "URI",
    "URIPath",
    "canonical_url",
]
