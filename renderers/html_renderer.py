"""
[V1.0] HTML 报告 - Jinja2 模板引擎
负责准备数据上下文，并调用 templates/report.html.j2 渲染 HTML。
"""
import logging
import os

from jinja2 import Environment, FileSystemLoader, select_autoescape

import heuristics
from config import GlobalConfig
from models import ReportData, ReportMeta
from utils import format_number, format_signed, truncate
from .base import BaseRenderer, ranked_contributors, sorted_commits, sorted_daily

logger = logging.getLogger(__name__)


def _get_css_styles(global_config: GlobalConfig) -> str:
    """读取 CSS 文件内容"""
    css_path = os.path.join(global_config.templates_path, global_config.CSS_FILE_NAME)
    try:
        with open(css_path, "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        logger.error(f"❌ CSS 模板文件未找到: {css_path}")
        return "/* CSS 模板文件未找到 */"


class HtmlRenderer(BaseRenderer):
    """带样式的 HTML 文档"""

    def __init__(self, global_config: GlobalConfig):
        super().__init__(global_config)
        self.env = Environment(
            loader=FileSystemLoader(global_config.templates_path),
            autoescape=select_autoescape(["html", "xml", "j2"]),
            keep_trailing_newline=True,
        )
        self.env.filters["number"] = format_number
        self.env.filters["signed"] = format_signed
        self.env.filters["shorten"] = truncate

    @property
    def name(self) -> str:
        return "html"

    def render(self, report: ReportData, meta: ReportMeta, detailed: bool = False) -> str:
        daily_rows = [
            {"day": day, "activity": heuristics.classify_activity(day.net_lines)}
            for day in sorted_daily(report)
        ]
        contributor_rows = [
            {
                "rank": rank,
                "badge": heuristics.rank_badge(rank),
                "contributor": contributor,
                "role": heuristics.classify_role(contributor.net_lines),
            }
            for rank, contributor in ranked_contributors(report)
        ]
        pattern_rows = [
            {"day": day, "pattern": heuristics.classify_pattern(day.net_lines)}
            for day in sorted_daily(report)
        ]

        template_context = {
            "title": f"Git History Report - {meta.repo_name}",
            "meta": meta,
            "css_content": _get_css_styles(self.global_config),
            "summary": report.summary,
            "daily_rows": daily_rows,
            "contributor_rows": contributor_rows,
            "commits": sorted_commits(report) if detailed else [],
            "detailed": detailed,
            "pattern_rows": pattern_rows,
            "active_days": report.active_days,
            "average_commits": f"{report.average_commits_per_day:.1f}",
            "peak_day": report.peak_day,
            "author_width": self.global_config.HTML_AUTHOR_WIDTH,
            "subject_width": self.global_config.HTML_SUBJECT_WIDTH,
        }

        template = self.env.get_template(self.global_config.HTML_TEMPLATE_NAME)
        logger.info(f"🎨 正在渲染 Jinja2 模板: {self.global_config.HTML_TEMPLATE_NAME}")
        return template.render(**template_context)
