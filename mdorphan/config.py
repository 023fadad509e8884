"""配置加载与校验模块，负责解析 .md-orphan.yaml 并提供结构化数据。"""

from __future__ import annotations  # 兼容未来类型注解

from dataclasses import dataclass, field  # 使用 dataclass 表示配置结构
from pathlib import Path  # 统一路径处理
from typing import Any, Dict, List, Optional  # 类型注解辅助

import yaml  # 解析 YAML 配置

from .constants import DEFAULT_CONFIG_FILE, DEFAULT_LOG_LEVEL  # 默认值


@dataclass
class LoggingConfig:
    """描述日志配置。"""

    level: str = DEFAULT_LOG_LEVEL  # 日志级别
    file: Optional[Path] = None  # 可选日志文件路径


@dataclass
class AppConfig:
    """聚合所有配置段。"""

    exclude: List[str] = field(default_factory=list)  # 排除模式
    verbose: bool = False  # 无问题时是否输出成功信息
    logging: LoggingConfig = field(default_factory=LoggingConfig)  # 日志配置
    config_path: Optional[Path] = None  # 配置文件路径，未使用文件时为 None


class ConfigError(Exception):
    """配置解析相关的自定义异常。"""


def _load_yaml(path: Path) -> Dict[str, Any]:
    """内部函数：加载 YAML 并返回字典。"""

    try:
        with path.open("r", encoding="utf-8") as fh:  # 打开配置文件
            data = yaml.safe_load(fh) or {}  # 空文件回退空 dict
    except FileNotFoundError as exc:  # 文件不存在
        raise ConfigError(f"config file not found: {path}") from exc
    except yaml.YAMLError as exc:  # YAML 语法错误
        raise ConfigError(f"cannot parse YAML in {path}: {exc}") from exc

    if not isinstance(data, dict):  # 根节点必须是映射
        raise ConfigError(f"top level of {path} must be a mapping")
    return data


def _parse_exclude(data: Dict[str, Any]) -> List[str]:
    """解析 exclude：允许列表或逗号分隔的字符串。"""

    raw = data.get("exclude", [])  # 缺省为空列表
    if isinstance(raw, str):  # 逗号分隔字符串
        raw = raw.split(",")
    if not isinstance(raw, list):  # 其余类型均非法
        raise ConfigError("exclude must be a list or a comma-separated string")
    patterns = [str(item).strip() for item in raw]  # 统一为字符串
    return [item for item in patterns if item]  # 去掉空项


def _parse_logging(data: Dict[str, Any], base_dir: Path) -> LoggingConfig:
    """解析 logging 段落并归一化文件路径。"""

    logging_data = data.get("logging", {})  # 获取 logging 数据
    if logging_data is None:  # 允许写成空段
        logging_data = {}
    if not isinstance(logging_data, dict):  # 校验类型
        raise ConfigError("logging must be a mapping")

    level = str(logging_data.get("level", DEFAULT_LOG_LEVEL))  # 日志级别
    file_value = logging_data.get("file")  # 文件路径
    file_path = (base_dir / str(file_value)).resolve() if file_value else None  # 相对配置文件目录
    return LoggingConfig(level=level, file=file_path)


def load_config(path: str | Path | None = None) -> AppConfig:
    """加载配置；未指定路径且默认文件不存在时返回默认配置。"""

    if path is None:  # 未显式指定时尝试默认文件
        default_path = Path.cwd() / DEFAULT_CONFIG_FILE
        if not default_path.is_file():
            return AppConfig()
        path = default_path

    config_path = Path(path).expanduser().resolve()  # 解析配置文件路径
    data = _load_yaml(config_path)  # 加载 YAML 数据

    verbose = data.get("verbose", False)  # 读取 verbose
    if not isinstance(verbose, bool):  # 只接受布尔值
        raise ConfigError("verbose must be true or false")

    return AppConfig(  # 返回聚合配置
        exclude=_parse_exclude(data),
        verbose=verbose,
        logging=_parse_logging(data, config_path.parent),
        config_path=config_path,
    )


__all__ = [  # 导出公开 API
    "AppConfig",
    "ConfigError",
    "LoggingConfig",
    "load_config",
]
