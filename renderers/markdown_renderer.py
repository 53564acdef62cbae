"""
[V1.0] Markdown 报告 (GFM 表格)
"""
import html
from typing import List, Sequence

import heuristics
from models import ReportData, ReportMeta
from utils import format_number, format_signed, truncate
from .base import BaseRenderer, ranked_contributors, sorted_commits, sorted_daily


def escape_text(text: str) -> str:
    """提交信息等外部文本按字面显示: 不产生 HTML 标签，也不产生链接/图片"""
    text = html.escape(text.replace("\\", "\\\\"), quote=False)
    return text.replace("[", "\\[").replace("]", "\\]")


def escape_cell(text: str) -> str:
    """表格单元格内的 '|' 还需要转义，否则会错列"""
    return escape_text(text).replace("|", "\\|")


def table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> List[str]:
    lines = [
        "| " + " | ".join(headers) + " |",
        "|" + "|".join("-" * (len(h) + 2) for h in headers) + "|",
    ]
    for row in rows:
        lines.append("| " + " | ".join(row) + " |")
    return lines


class MarkdownRenderer(BaseRenderer):
    """GitHub 风格 Markdown"""

    @property
    def name(self) -> str:
        return "markdown"

    def render(self, report: ReportData, meta: ReportMeta, detailed: bool = False) -> str:
        lines = [
            "# 📊 Git History Report",
            "",
            f"**Repository:** {escape_text(meta.repo_name)}  ",
            f"**Generated on:** {meta.generated_text}",
            "",
        ]
        lines += self._filters(meta)
        lines += self._summary(report)
        lines += self._daily(report)
        lines += self._contributors(report)
        if detailed:
            lines += self._detailed(report)
        lines += self._velocity(report)
        lines += ["---", "", "*Report generated by Git History Report Generator*"]
        return "\n".join(lines) + "\n"

    def _filters(self, meta: ReportMeta) -> List[str]:
        if not meta.has_filters:
            return []
        lines = ["## 🔍 Filters Applied", ""]
        if meta.preset:
            lines.append(f"- **Preset:** {escape_text(meta.preset)}")
        if meta.since:
            lines.append(f"- **Since:** {escape_text(meta.since)}")
        if meta.until:
            lines.append(f"- **Until:** {escape_text(meta.until)}")
        if meta.author:
            lines.append(f"- **Author:** {escape_text(meta.author)}")
        return lines + [""]

    def _summary(self, report: ReportData) -> List[str]:
        summary = report.summary
        rows = [
            ["**Total Commits**", format_number(summary.total_commits), "Total number of commits"],
            ["**Lines Added**", format_number(summary.total_lines_added), "New code additions"],
            ["**Lines Removed**", format_number(summary.total_lines_removed), "Code deletions"],
            ["**Net Change**", format_signed(summary.net_lines), "Overall code growth"],
        ]
        return ["## 📈 Summary Statistics", ""] + table(["Metric", "Value", "Description"], rows) + [""]

    def _daily(self, report: ReportData) -> List[str]:
        rows = []
        for day in sorted_daily(report):
            level = heuristics.classify_activity(day.net_lines)
            rows.append(
                [
                    day.date.isoformat(),
                    format_number(day.commit_count),
                    format_number(day.lines_added),
                    format_number(day.lines_removed),
                    format_signed(day.net_lines),
                    format_number(day.distinct_author_count),
                    f"{level.emoji * max(level.intensity, 1)} {level.label}",
                ]
            )
        headers = ["Date", "Commits", "Added", "Removed", "Net", "Authors", "Activity Level"]
        return ["## 📅 Daily Activity Breakdown", ""] + table(headers, rows) + [""]

    def _contributors(self, report: ReportData) -> List[str]:
        rows = []
        for rank, contributor in ranked_contributors(report):
            role = heuristics.classify_role(contributor.net_lines)
            rows.append(
                [
                    f"{heuristics.rank_badge(rank)} {rank}",
                    escape_cell(contributor.author_name),
                    format_number(contributor.commit_count),
                    format_number(contributor.lines_added),
                    format_number(contributor.lines_removed),
                    format_signed(contributor.net_lines),
                    f"**{role.label}** - {role.description}",
                ]
            )
        headers = ["Rank", "Contributor", "Commits", "Added", "Removed", "Net", "Role"]
        return ["## 👥 Contributors", ""] + table(headers, rows) + [""]

    def _detailed(self, report: ReportData) -> List[str]:
        author_width = self.global_config.MARKDOWN_AUTHOR_WIDTH
        subject_width = self.global_config.MARKDOWN_SUBJECT_WIDTH
        rows = [
            [
                commit.date.isoformat(),
                f"`{commit.commit_hash[:7]}`",
                escape_cell(truncate(commit.author_name, author_width)),
                format_number(commit.lines_added),
                format_number(commit.lines_removed),
                format_signed(commit.net_lines),
                escape_cell(truncate(commit.subject, subject_width)),
            ]
            for commit in sorted_commits(report)
        ]
        headers = ["Date", "Commit", "Author", "Added", "Removed", "Net", "Commit Message"]
        return ["## 📋 Detailed Commit History", ""] + table(headers, rows) + [""]

    def _velocity(self, report: ReportData) -> List[str]:
        peak = report.peak_day
        lines = [
            "## 🏃 Development Velocity",
            "",
            f"- **Total Active Days:** {report.active_days}",
            f"- **Average Commits per Day:** {report.average_commits_per_day:.1f}",
            f"- **Peak Activity Day:** {peak.isoformat() if peak else 'N/A'}",
            "",
            "### Development Pattern Analysis",
            "",
        ]
        for day in sorted_daily(report):
            lines.append(
                f"- **{day.date.isoformat()}:** {format_signed(day.net_lines)} lines - "
                f"{heuristics.classify_pattern(day.net_lines)}"
            )
        return lines + [""]
