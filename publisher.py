"""
[V1.2] 报告上传
把渲染好的报告上传到报告服务器 (POST /api/reports)，服务器按 TTL 保存并返回哈希地址。
服务器以 HTML 形式提供报告，非 HTML 格式在上传前先转换。
"""
import html
import logging
from typing import Optional

import markdown
import requests

from config import GlobalConfig
from errors import PublishError
from models import PublishedReport

logger = logging.getLogger(__name__)

REPORTS_ENDPOINT = "/api/reports"

HTML_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<title>{title}</title>
<style>
body {{ font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; margin: 20px auto; max-width: 1200px; }}
table {{ border-collapse: collapse; }}
th, td {{ padding: 6px 12px; border: 1px solid #dee2e6; }}
pre {{ font-family: SFMono-Regular, Menlo, Consolas, monospace; line-height: 1.2; }}
</style>
</head>
<body>
{body}
</body>
</html>
"""


def markdown_to_html(content: str) -> str:
    """Markdown 转 HTML，原始 HTML 标签按文本输出"""
    md = markdown.Markdown(extensions=["tables", "fenced_code", "sane_lists"])
    md.preprocessors.deregister("html_block")
    md.inlinePatterns.deregister("html")
    return md.convert(content)


def to_html_document(content: str, output_format: str, title: str = "Git History Report") -> str:
    """
    把报告转换为可直接由服务器提供的 HTML 文档。
    - html: 原样返回
    - markdown: 使用 markdown 库转换 (支持表格)
    - ascii: 转义后放入 <pre>
    """
    if output_format == "html":
        return content
    if output_format == "markdown":
        body = markdown_to_html(content)
    else:
        body = f"<pre>{html.escape(content)}</pre>"
    return HTML_PAGE.format(title=html.escape(title), body=body)


class ReportPublisher:
    """
    报告服务器客户端
    - 201: 上传成功，返回 PublishedReport
    - 400: 服务器拒绝 (内容为空 / TTL 非法)
    - 其他: 服务器错误或网络异常
    """

    def __init__(
        self,
        server_url: str,
        timeout: int = GlobalConfig.PUBLISH_TIMEOUT,
        max_ttl: int = GlobalConfig.MAX_TTL,
    ):
        self.server_url = server_url.rstrip("/")
        self.timeout = timeout
        self.max_ttl = max_ttl

    def validate_ttl(self, ttl: int):
        if not isinstance(ttl, int) or isinstance(ttl, bool) or ttl <= 0 or ttl > self.max_ttl:
            raise PublishError(
                f"Invalid TTL: {ttl}. Must be a positive integer <= {self.max_ttl} seconds"
            )

    def publish(self, content: str, ttl: int) -> PublishedReport:
        """上传报告内容，失败时抛出 PublishError"""
        self.validate_ttl(ttl)
        if not content or not content.strip():
            raise PublishError("Empty content cannot be published")

        url = f"{self.server_url}{REPORTS_ENDPOINT}"
        logger.info(f"📤 正在上传报告到 {url} (TTL: {ttl} 秒, {len(content.encode('utf-8'))} 字节)")
        try:
            resp = requests.post(
                url, json={"content": content, "ttl": ttl}, timeout=self.timeout
            )
        except requests.RequestException as e:
            raise PublishError(f"Could not connect to server at {self.server_url}: {e}") from e

        if resp.status_code == 201:
            return self._parse_created(resp)

        message = self._error_message(resp)
        if resp.status_code == 400:
            raise PublishError(f"Server rejected request: {message}", resp.status_code)
        raise PublishError(f"Server error: {message}", resp.status_code)

    def _parse_created(self, resp: requests.Response) -> PublishedReport:
        try:
            data = resp.json()
            report_url = data["url"]
            if report_url.startswith("/"):
                report_url = f"{self.server_url}{report_url}"
            published = PublishedReport(
                report_hash=data["reportHash"],
                url=report_url,
                expires_at=int(data["expiresAt"]),
                created_at=int(data["createdAt"]),
            )
        except (ValueError, KeyError, TypeError) as e:
            raise PublishError(f"Unexpected server response: {e}", resp.status_code) from e
        logger.info(f"✅ 报告上传成功: {published.url} (过期时间: {published.expires_text})")
        return published

    @staticmethod
    def _error_message(resp: requests.Response) -> str:
        try:
            data = resp.json()
        except ValueError:
            return f"HTTP {resp.status_code}"
        message: Optional[str] = data.get("message") if isinstance(data, dict) else None
        return message or f"HTTP {resp.status_code}"
