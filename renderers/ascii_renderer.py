"""
[V1.0] ASCII 报告 (终端输出)
所有表格的列宽根据内容的显示宽度计算，任何字段都不会破坏对齐。
"""
from typing import List, Optional, Sequence

import heuristics
from models import ReportData, ReportMeta
from utils import display_width, format_number, format_signed, pad, truncate
from .base import BaseRenderer, ranked_contributors, sorted_commits, sorted_daily

TITLE = "GIT REPOSITORY HISTORY REPORT"
MAX_INTENSITY = 5


def _rule(widths: Sequence[int], left: str, middle: str, right: str) -> str:
    return left + middle.join("═" * (w + 2) for w in widths) + right


def _row(cells: Sequence[str], widths: Sequence[int], aligns: Sequence[str]) -> str:
    padded = [pad(cell, w, align) for cell, w, align in zip(cells, widths, aligns)]
    return "║ " + " ║ ".join(padded) + " ║"


def box_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    aligns: Sequence[str],
    title: Optional[str] = None,
) -> List[str]:
    """
    绘制带标题的 box-drawing 表格，返回行列表。
    标题比表格更宽时，加宽最后一列。
    """
    widths = [display_width(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], display_width(cell))

    inner = sum(w + 2 for w in widths) + len(widths) - 1
    if title and display_width(title) + 2 > inner:
        widths[-1] += display_width(title) + 2 - inner
        inner = display_width(title) + 2

    lines = []
    if title:
        lines.append("╔" + "═" * inner + "╗")
        lines.append("║" + pad(title, inner, "center") + "║")
        lines.append(_rule(widths, "╠", "╦", "╣"))
    else:
        lines.append(_rule(widths, "╔", "╦", "╗"))
    lines.append(_row(headers, widths, ["center"] * len(headers)))
    lines.append(_rule(widths, "╠", "╬", "╣"))
    for row in rows:
        lines.append(_row(row, widths, aligns))
    lines.append(_rule(widths, "╚", "╩", "╝"))
    return lines


def text_box(body: Sequence[str], title: Optional[str] = None, min_width: int = 0) -> List[str]:
    """绘制单列文本框"""
    content = list(body)
    width = max([min_width] + [display_width(line) for line in content])
    if title:
        width = max(width, display_width(title))
    lines = ["╔" + "═" * (width + 2) + "╗"]
    if title:
        lines.append("║ " + pad(title, width, "center") + " ║")
        if content:
            lines.append("╠" + "═" * (width + 2) + "╣")
    for line in content:
        lines.append("║ " + pad(line, width) + " ║")
    lines.append("╚" + "═" * (width + 2) + "╝")
    return lines


def activity_cell(net_lines: int) -> str:
    level = heuristics.classify_activity(net_lines)
    flames = "*" * level.intensity
    return f"{flames:<{MAX_INTENSITY}} {level.title}"


class AsciiRenderer(BaseRenderer):
    """终端 box-drawing 表格格式"""

    @property
    def name(self) -> str:
        return "ascii"

    def render(self, report: ReportData, meta: ReportMeta, detailed: bool = False) -> str:
        sections = [
            text_box([], title=TITLE, min_width=len(TITLE) + 20),
            self._summary_table(report, meta),
            self._daily_table(report),
            self._contributor_table(report),
        ]
        if detailed:
            sections.append(self._detailed_table(report))
        sections.append(self._velocity_box(report))
        sections.append(text_box([f"Generated on {meta.generated_text} by Git History Report Generator"]))
        return "\n\n".join("\n".join(section) for section in sections) + "\n"

    def _summary_table(self, report: ReportData, meta: ReportMeta) -> List[str]:
        summary = report.summary
        rows = [
            [
                "Commits",
                format_number(summary.total_commits),
                format_number(summary.total_lines_added),
                format_number(summary.total_lines_removed),
                f"Net Change: {format_signed(summary.net_lines)} lines",
            ],
            [
                "Repository",
                truncate(meta.repo_name, 30),
                "",
                "",
                f"Date Range: {meta.date_range_text}",
            ],
        ]
        if meta.preset:
            rows.append(["Preset", meta.preset, "", "", ""])
        if meta.author:
            rows.append(["Author", truncate(meta.author, 30), "", "", ""])
        return box_table(
            ["METRIC", "VALUE", "ADDED", "REMOVED", "DETAILS"],
            rows,
            ["left", "right", "right", "right", "left"],
            title="SUMMARY",
        )

    def _daily_table(self, report: ReportData) -> List[str]:
        rows = [
            [
                day.date.isoformat(),
                format_number(day.commit_count),
                format_number(day.lines_added),
                format_number(day.lines_removed),
                format_signed(day.net_lines),
                format_number(day.distinct_author_count),
                activity_cell(day.net_lines),
            ]
            for day in sorted_daily(report)
        ]
        return box_table(
            ["DATE", "COMMITS", "ADDED", "REMOVED", "NET", "AUTHORS", "ACTIVITY LEVEL"],
            rows,
            ["left", "right", "right", "right", "right", "right", "left"],
            title="DAILY ACTIVITY",
        )

    def _contributor_table(self, report: ReportData) -> List[str]:
        width = self.global_config.ASCII_AUTHOR_WIDTH
        rows = [
            [
                f"#{rank}",
                truncate(contributor.author_name, width),
                format_number(contributor.commit_count),
                format_number(contributor.lines_added),
                format_number(contributor.lines_removed),
                format_signed(contributor.net_lines),
                heuristics.classify_role(contributor.net_lines).label,
            ]
            for rank, contributor in ranked_contributors(report)
        ]
        return box_table(
            ["RANK", "CONTRIBUTOR", "COMMITS", "ADDED", "REMOVED", "NET", "ROLE"],
            rows,
            ["right", "left", "right", "right", "right", "right", "left"],
            title="CONTRIBUTOR BREAKDOWN",
        )

    def _detailed_table(self, report: ReportData) -> List[str]:
        author_width = self.global_config.ASCII_AUTHOR_WIDTH
        subject_width = self.global_config.ASCII_SUBJECT_WIDTH
        rows = [
            [
                commit.date.isoformat(),
                commit.commit_hash[:7],
                truncate(commit.author_name, author_width),
                format_number(commit.lines_added),
                format_number(commit.lines_removed),
                format_signed(commit.net_lines),
                truncate(commit.subject, subject_width),
            ]
            for commit in sorted_commits(report)
        ]
        return box_table(
            ["DATE", "COMMIT", "CONTRIBUTOR", "ADDED", "REMOVED", "NET", "COMMIT MESSAGE"],
            rows,
            ["left", "left", "left", "right", "right", "right", "left"],
            title="DETAILED COMMIT HISTORY",
        )

    def _velocity_box(self, report: ReportData) -> List[str]:
        peak = report.peak_day
        body = [
            "Development Statistics:",
            f"  - Total Active Days: {report.active_days}",
            f"  - Average Commits/Day: {report.average_commits_per_day:.1f}",
            f"  - Peak Activity Day: {peak.isoformat() if peak else 'N/A'}",
            "",
            "Development Pattern Analysis:",
        ]
        for day in sorted_daily(report):
            body.append(
                f"  - {day.date.isoformat()}: {format_signed(day.net_lines)} lines - "
                f"{heuristics.classify_pattern(day.net_lines)}"
            )
        return text_box(body, title="VELOCITY METRICS")
