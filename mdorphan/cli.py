"""md-orphan CLI 入口，使用 argparse 解析参数并执行一次爬取。"""

from __future__ import annotations  # 确保未来兼容性

import argparse  # 标准库 CLI 解析器
import logging  # 记录爬取摘要
import os  # 判断入口是否为文件
import sys  # 控制退出码
from typing import List  # 类型注解

from rich.console import Console  # 优化控制台输出
from rich.markup import escape  # 转义路径中的方括号

from . import __version__  # 版本号
from .config import AppConfig, ConfigError, load_config  # 配置加载
from .constants import DEFAULT_CONFIG_FILE, PROG_NAME  # 常量
from .crawler import bfs_crawl, find_orphans  # 爬取核心
from .discovery import discover_files  # 目录枚举
from .exclude import split_patterns, validate_patterns  # 排除模式
from .logging_setup import init_logging  # 日志初始化
from .report import print_report  # 结果输出
from .utils.pathing import base_name, dir_name, real_path  # 路径工具

console = Console()  # 结果输出到 stdout
err_console = Console(stderr=True)  # 错误信息输出到 stderr

EXIT_OK = 0  # 全部可达且无问题
EXIT_PROBLEMS = 1  # 存在问题或孤立文档
EXIT_USAGE = 2  # 配置或参数错误

logger = logging.getLogger(__name__)


def _resolve_entries(entries: List[str]) -> List[str]:
    """将入口规范化为绝对路径，缺失或不是文件时抛出 ConfigError。"""

    resolved: List[str] = []
    for entry in entries:
        absolute = real_path(entry)  # 解析符号链接
        if absolute is None:
            raise ConfigError(f"{entry}: no such file")
        if not os.path.isfile(absolute):
            raise ConfigError(f"{entry}: not a file")
        resolved.append(absolute)
    return resolved


def _collect_patterns(config: AppConfig, cli_values: List[str]) -> List[str]:
    """合并配置文件与命令行的排除模式并统一校验。"""

    return validate_patterns(config.exclude + split_patterns(cli_values))


def build_parser() -> argparse.ArgumentParser:
    """构建 argparse 解析器。"""

    parser = argparse.ArgumentParser(
        prog=PROG_NAME,
        description="Detect markdown files not reachable from entry points",
    )
    parser.add_argument("entry_points", nargs="+", help="One or more markdown entry points")
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        help="Exclude paths by prefix or glob (comma-separated, repeatable)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=None,
        help="Show success message when all files are reachable",
    )
    parser.add_argument(
        "--config",
        default=None,
        help=f"YAML config file (default: ./{DEFAULT_CONFIG_FILE} when present)",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: warning)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(args: argparse.Namespace) -> int:
    """执行一次完整检查并返回退出码。"""

    try:
        config = load_config(args.config)  # 加载配置文件
        patterns = _collect_patterns(config, args.exclude)  # 遍历前校验排除模式
        entries = _resolve_entries(args.entry_points)  # 规范化入口
    except ConfigError as exc:
        err_console.print(f"[red]{PROG_NAME}: {escape(str(exc))}[/red]", soft_wrap=True)
        return EXIT_USAGE

    init_logging(args.log_level or config.logging.level, config.logging.file)
    verbose = config.verbose if args.verbose is None else args.verbose

    root = dir_name(entries[0]) or "/"  # 第一个入口所在目录作为爬取根
    all_files = discover_files(root, patterns)
    result = bfs_crawl(entries, root, all_files)
    orphans = find_orphans(all_files, result.reachable)
    logger.info(
        "crawled %d of %d files under %s, %d issues, %d orphans",
        len(result.reachable),
        len(all_files),
        root,
        len(result.issues),
        len(orphans),
    )

    names = ", ".join(base_name(entry) for entry in args.entry_points)
    has_problems = print_report(console, result, orphans, len(all_files), root, names, verbose)
    return EXIT_PROBLEMS if has_problems else EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """CLI 入口函数，解析参数并执行。"""

    parser = build_parser()  # 构建解析器
    args = parser.parse_args(argv)  # 解析参数
    return run(args)


if __name__ == "__main__":  # 允许直接运行模块
    sys.exit(main())  # 调用 main 并使用返回值作为退出码
