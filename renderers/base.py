from abc import ABC, abstractmethod
from typing import List, Tuple

from config import GlobalConfig
from models import CommitRecord, ContributorSummary, DailySummary, ReportData, ReportMeta


class BaseRenderer(ABC):
    """
    [V1.0] 报告渲染器抽象基类
    所有输出格式 (ascii, markdown, html) 都必须继承此类。
    渲染是纯函数：相同的聚合结果与元信息总是得到逐字节相同的输出。
    """

    def __init__(self, global_config: GlobalConfig):
        self.global_config = global_config

    @property
    @abstractmethod
    def name(self) -> str:
        """返回格式名称 (与 --format 参数一致)"""
        pass

    @abstractmethod
    def render(self, report: ReportData, meta: ReportMeta, detailed: bool = False) -> str:
        """
        生成完整的报告文本。
        :param report: 聚合结果
        :param meta: 仓库名、过滤条件、生成时间
        :param detailed: 是否附带逐条提交明细
        """
        pass


def sorted_daily(report: ReportData) -> List[DailySummary]:
    """按日期升序"""
    return [report.daily[day] for day in sorted(report.daily)]


def ranked_contributors(report: ReportData) -> List[Tuple[int, ContributorSummary]]:
    """按净变更行数降序，相同时保持首次出现的顺序 (sorted 是稳定排序)"""
    ranked = sorted(
        report.contributors.values(), key=lambda c: c.net_lines, reverse=True
    )
    return list(enumerate(ranked, start=1))


def sorted_commits(report: ReportData) -> List[CommitRecord]:
    """按日期升序，同一天保持原始提交顺序"""
    return sorted(report.commits, key=lambda c: c.date)
