"""
[V1.0] 提交聚合
一次遍历同时构建 全局汇总 / 按日汇总 / 按作者汇总。
累加器只在本次运行内部使用，最终冻结为只读的 ReportData。
"""
import logging
from datetime import date
from typing import Dict, Iterable, List, Set

from models import (
    CommitRecord,
    ContributorSummary,
    DailySummary,
    ReportData,
    ReportSummary,
)

logger = logging.getLogger(__name__)


class _Totals:
    __slots__ = ("commit_count", "lines_added", "lines_removed")

    def __init__(self):
        self.commit_count = 0
        self.lines_added = 0
        self.lines_removed = 0

    def add(self, commit: CommitRecord):
        self.commit_count += 1
        self.lines_added += commit.lines_added
        self.lines_removed += commit.lines_removed


def aggregate_commits(commits: Iterable[CommitRecord]) -> ReportData:
    """聚合提交记录，按键的首次出现顺序保存各个汇总"""
    total = _Totals()
    daily: Dict[date, _Totals] = {}
    daily_authors: Dict[date, Set[str]] = {}
    contributors: Dict[str, _Totals] = {}
    ordered_commits: List[CommitRecord] = []

    for commit in commits:
        ordered_commits.append(commit)
        total.add(commit)

        daily.setdefault(commit.date, _Totals()).add(commit)
        daily_authors.setdefault(commit.date, set()).add(commit.author_name)

        contributors.setdefault(commit.author_name, _Totals()).add(commit)

    report = ReportData(
        summary=ReportSummary(
            total_commits=total.commit_count,
            total_lines_added=total.lines_added,
            total_lines_removed=total.lines_removed,
        ),
        daily={
            day: DailySummary(
                date=day,
                commit_count=totals.commit_count,
                lines_added=totals.lines_added,
                lines_removed=totals.lines_removed,
                distinct_author_count=len(daily_authors[day]),
            )
            for day, totals in daily.items()
        },
        contributors={
            name: ContributorSummary(
                author_name=name,
                commit_count=totals.commit_count,
                lines_added=totals.lines_added,
                lines_removed=totals.lines_removed,
            )
            for name, totals in contributors.items()
        },
        commits=ordered_commits,
    )
    logger.info(
        f"📊 聚合完成: {report.summary.total_commits} 个提交, "
        f"{len(report.daily)} 个活跃日, {len(report.contributors)} 位贡献者"
    )
    return report
