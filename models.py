from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Dict, List, Optional, Union


class LineKind(Enum):
    """日志行的分类结果"""

    HEADER = "header"
    FILE_STAT = "file_stat"
    BINARY_MARKER = "binary_marker"
    NOISE = "noise"


@dataclass(frozen=True)
class HeaderLine:
    """提交头: 日期|作者|邮箱|标题|哈希"""

    date: date
    author_name: str
    author_email: str
    subject: str
    commit_hash: str

    kind = LineKind.HEADER


@dataclass(frozen=True)
class FileStatLine:
    """单个文件的 numstat 统计: 新增<TAB>删除<TAB>路径"""

    lines_added: int
    lines_removed: int
    path: str

    kind = LineKind.FILE_STAT


@dataclass(frozen=True)
class BinaryMarkerLine:
    """二进制文件标记: -<TAB>-<TAB>路径"""

    path: str

    kind = LineKind.BINARY_MARKER


@dataclass(frozen=True)
class NoiseLine:
    """空行或无法识别的行"""

    raw: str

    kind = LineKind.NOISE


ClassifiedLine = Union[HeaderLine, FileStatLine, BinaryMarkerLine, NoiseLine]


@dataclass(frozen=True)
class CommitRecord:
    """单个提交的数据模型 (文件统计已折叠)"""

    date: date
    author_name: str
    author_email: str
    subject: str
    commit_hash: str
    lines_added: int = 0
    lines_removed: int = 0

    @property
    def net_lines(self) -> int:
        return self.lines_added - self.lines_removed


@dataclass(frozen=True)
class DailySummary:
    """按日期汇总"""

    date: date
    commit_count: int
    lines_added: int
    lines_removed: int
    distinct_author_count: int

    @property
    def net_lines(self) -> int:
        return self.lines_added - self.lines_removed


@dataclass(frozen=True)
class ContributorSummary:
    """按作者汇总"""

    author_name: str
    commit_count: int
    lines_added: int
    lines_removed: int

    @property
    def net_lines(self) -> int:
        return self.lines_added - self.lines_removed


@dataclass(frozen=True)
class ReportSummary:
    """全局汇总"""

    total_commits: int = 0
    total_lines_added: int = 0
    total_lines_removed: int = 0

    @property
    def net_lines(self) -> int:
        return self.total_lines_added - self.total_lines_removed


@dataclass(frozen=True)
class ReportData:
    """
    一次运行的全部聚合结果，交给渲染器只读使用。
    - daily / contributors 的插入顺序即首次出现的顺序
    - commits 保持提交头出现的顺序
    """

    summary: ReportSummary
    daily: Dict[date, DailySummary]
    contributors: Dict[str, ContributorSummary]
    commits: List[CommitRecord]

    @property
    def active_days(self) -> int:
        return len(self.daily)

    @property
    def average_commits_per_day(self) -> float:
        if not self.daily:
            return 0.0
        return round(self.summary.total_commits / len(self.daily), 1)

    @property
    def peak_day(self) -> Optional[date]:
        """新增行数最多的日期 (相同时取较早日期)"""
        if not self.daily:
            return None
        return max(
            sorted(self.daily), key=lambda day: self.daily[day].lines_added
        )


@dataclass(frozen=True)
class ReportMeta:
    """渲染所需的报告元信息 (仓库名、过滤条件、生成时间)"""

    repo_name: str
    generated_at: datetime
    since: Optional[str] = None
    until: Optional[str] = None
    preset: Optional[str] = None
    author: Optional[str] = None

    @property
    def has_filters(self) -> bool:
        return any([self.since, self.until, self.preset, self.author])

    @property
    def date_range_text(self) -> str:
        if not (self.since or self.until):
            return "All Time"
        parts = []
        if self.since:
            parts.append(f"from {self.since}")
        if self.until:
            parts.append(f"to {self.until}")
        return " ".join(parts)

    @property
    def generated_text(self) -> str:
        return self.generated_at.strftime("%Y-%m-%d %H:%M:%S")


@dataclass
class PublishedReport:
    """报告服务器返回的上传结果"""

    report_hash: str
    url: str
    expires_at: int
    created_at: int

    @property
    def expires_text(self) -> str:
        return datetime.fromtimestamp(self.expires_at).strftime("%Y-%m-%d %H:%M:%S")
