"""
[V1.0] 命令行界面 (Interface) 层
[V1.1] 新增 --preset / --input
[V1.2] 新增 --publish / --ttl / --server
"""
import argparse
import logging
from typing import List, Optional

from config import GlobalConfig
from context import RunContext
from errors import UnknownPresetError
from orchestrator import ReportOrchestrator, EXIT_FAILURE, EXIT_OK
from presets import AVAILABLE_PRESETS, resolve_preset

logger = logging.getLogger(__name__)

EXAMPLES = """
示例:
  %(prog)s                                           # 全部历史 (ASCII)
  %(prog)s --preset today                            # 今日提交
  %(prog)s --preset last-week --format html          # 最近一周 (HTML)
  %(prog)s --since 2025-09-01 --until 2025-09-18     # 指定日期范围
  %(prog)s --author "John Doe" --detailed -f markdown
  %(prog)s --preset sprint -f html --publish --ttl 7200
  git log --pretty=format:"%%ad|%%an|%%ae|%%s|%%H" --date=short --numstat | %(prog)s -i -
"""


def _ttl_type(value: str) -> int:
    try:
        ttl = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"TTL 必须是整数: {value}")
    if ttl <= 0 or ttl > GlobalConfig.MAX_TTL:
        raise argparse.ArgumentTypeError(
            f"TTL 必须在 1 到 {GlobalConfig.MAX_TTL} 秒之间: {value}"
        )
    return ttl


def setup_parser() -> argparse.ArgumentParser:
    """
    负责所有 argparse 的定义。
    """
    parser = argparse.ArgumentParser(
        description="Git 历史报告生成器 (ASCII / Markdown / HTML)",
        formatter_class=argparse.RawTextHelpFormatter,
        epilog=EXAMPLES,
    )

    # --- 范围参数 ---
    parser.add_argument(
        "-s", "--since", type=str, help="起始日期 (例如 '2025-09-01', '1 week ago')"
    )
    parser.add_argument(
        "-u", "--until", type=str, help="结束日期 (例如 '2025-09-18', 'today')"
    )
    parser.add_argument(
        "-p",
        "--preset",
        type=str,
        help="快捷日期范围 (与 -s/-u 同时使用时，-s/-u 优先)。\n"
        f"可选: {', '.join(AVAILABLE_PRESETS)}",
    )
    parser.add_argument("-a", "--author", type=str, help="只统计指定作者的提交")

    # --- 报告参数 ---
    parser.add_argument(
        "-d", "--detailed", action="store_true", help="附带逐条提交明细"
    )
    parser.add_argument(
        "-f",
        "--format",
        dest="output_format",
        type=str.lower,
        choices=GlobalConfig.SUPPORTED_FORMATS,
        default=GlobalConfig.DEFAULT_FORMAT,
        help=f"输出格式: {', '.join(GlobalConfig.SUPPORTED_FORMATS)} (默认: {GlobalConfig.DEFAULT_FORMAT})",
    )
    parser.add_argument("-o", "--output", type=str, help="保存到文件 (默认输出到 stdout)")

    # --- 数据来源 ---
    parser.add_argument(
        "-r", "--repo", type=str, default=".", help="Git 仓库路径 (默认: 当前目录)"
    )
    parser.add_argument(
        "-i",
        "--input",
        type=str,
        default=None,
        help="读取已生成的 git log 文本而不是执行 git ('-' 表示标准输入)。\n"
        "此时 -s/-u/-p/-a 在解析后过滤，日期需为 YYYY-MM-DD",
    )

    # --- 上传参数 ---
    parser.add_argument(
        "--publish", action="store_true", help="上传到报告服务器并输出临时链接"
    )
    parser.add_argument(
        "--ttl",
        type=_ttl_type,
        default=GlobalConfig.DEFAULT_TTL,
        help=f"链接有效期 (秒，默认 {GlobalConfig.DEFAULT_TTL}，最大 {GlobalConfig.MAX_TTL})",
    )
    parser.add_argument(
        "--server",
        type=str,
        default=None,
        help="报告服务器地址 (默认: $GIT_REPORT_SERVER_URL 或 http://localhost:3001)",
    )

    return parser


def build_context(args: argparse.Namespace, global_config: GlobalConfig) -> RunContext:
    """
    合并命令行参数与全局配置，组装 RunContext。
    预设只填充未显式指定的 since/until。
    """
    since, until = args.since, args.until
    if args.preset:
        preset_since, preset_until = resolve_preset(args.preset)
        since = since or preset_since
        until = until or preset_until
        logger.info(f"ℹ️ 已应用预设 '{args.preset}': since='{since}', until='{until}'")

    return RunContext(
        repo_path=args.repo,
        input_path=args.input,
        since=since,
        until=until,
        preset=args.preset,
        author=args.author,
        output_format=args.output_format,
        detailed=args.detailed,
        output_file=args.output,
        publish=args.publish,
        ttl=args.ttl,
        server_url=args.server or global_config.REPORT_SERVER_URL,
        global_config=global_config,
    )


def run_cli(argv: Optional[List[str]] = None) -> int:
    """
    主入口点，返回进程退出码。
    """
    parser = setup_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # 用法错误统一返回 1 (2 保留给上传失败)
        return EXIT_OK if e.code == 0 else EXIT_FAILURE
    global_config = GlobalConfig()

    try:
        run_context = build_context(args, global_config)
    except UnknownPresetError as e:
        logger.error(f"❌ {e}")
        return EXIT_FAILURE

    logger.info("=" * 50)
    logger.info("🚀 Git History Report 启动...")
    logger.info(f"   [目标仓库]: {run_context.input_path or run_context.repo_path}")
    logger.info(f"   [输出格式]: {run_context.output_format}")
    if run_context.author:
        logger.info(f"   [作者过滤]: {run_context.author}")
    logger.info("=" * 50)

    orchestrator = ReportOrchestrator(run_context)
    return orchestrator.run()
