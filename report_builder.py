"""
[V1.0] 报告生成器
日志文本 -> 归类行 -> 提交记录 -> 聚合结果 -> 渲染文档
这是核心引擎面向调用方的唯一入口；只在这里抛出 EmptyResultError / UnsupportedFormatError。
"""
import logging
import os
from typing import Iterable, Optional

from aggregator import aggregate_commits
from commit_filter import CommitFilter
from config import GlobalConfig
from errors import EmptyResultError
from log_parser import iter_commits
from models import ReportData, ReportMeta
from renderers.factory import get_renderer

logger = logging.getLogger(__name__)


def build_report_data(
    log_lines: Iterable[str], commit_filter: Optional[CommitFilter] = None
) -> ReportData:
    """解析并聚合日志 (可选按条件过滤)，没有任何提交时抛出 EmptyResultError"""
    commits = iter_commits(log_lines)
    if commit_filter is not None:
        commits = commit_filter.apply(commits)
    report = aggregate_commits(commits)
    if report.summary.total_commits == 0:
        raise EmptyResultError()
    return report


def generate_report(
    log_lines: Iterable[str],
    output_format: str,
    meta: ReportMeta,
    global_config: GlobalConfig,
    detailed: bool = False,
    commit_filter: Optional[CommitFilter] = None,
) -> str:
    """
    生成完整的报告文档。
    格式在读取日志之前校验，失败时不会产生任何输出。
    """
    renderer = get_renderer(output_format, global_config)
    report = build_report_data(log_lines, commit_filter)
    return renderer.render(report, meta, detailed=detailed)


def save_report(content: str, output_path: str) -> Optional[str]:
    """保存报告到文件"""
    full_path = os.path.abspath(output_path)
    try:
        directory = os.path.dirname(full_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(full_path, "w", encoding="utf-8") as f:
            f.write(content)
        logger.info(f"✅ 报告已保存: {full_path}")
        return full_path
    except OSError as e:
        logger.error(f"❌ 保存报告失败 ({full_path}): {e}")
        return None
