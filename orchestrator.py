"""
[V1.2] 业务逻辑编排器
数据源 -> 报告引擎 -> 输出 (stdout / 文件) -> (可选) 上传到报告服务器
"""
import logging
import sys
from datetime import datetime
from typing import Iterator

from context import RunContext
from data_sources.factory import get_data_source
from errors import EmptyResultError, PublishError, ReportError
from models import ReportMeta
from publisher import ReportPublisher, to_html_document
import report_builder

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_PUBLISH_FAILURE = 2


class ReportOrchestrator:
    """
    负责执行报告生成的核心业务流程。
    """

    def __init__(self, context: RunContext, stdout=None):
        self.context = context
        self.global_config = context.global_config
        self.stdout = stdout or sys.stdout
        self.data_source = get_data_source(context)

    def build_meta(self) -> ReportMeta:
        return ReportMeta(
            repo_name=self.data_source.describe(),
            generated_at=datetime.now(),
            since=self.context.since,
            until=self.context.until,
            preset=self.context.preset,
            author=self.context.author,
        )

    def run(self) -> int:
        """执行一次完整的报告生成，返回进程退出码"""

        # --- 0. 验证数据源 ---
        if not self.data_source.validate():
            logger.error("❌ 数据源验证失败，终止运行。")
            return EXIT_FAILURE

        # --- 1. 生成报告 ---
        logger.info("🚀 正在处理 Git 历史...")
        try:
            content = report_builder.generate_report(
                self._iter_log_lines(),
                self.context.output_format,
                self.build_meta(),
                self.global_config,
                detailed=self.context.detailed,
                commit_filter=self.data_source.commit_filter(),
            )
        except EmptyResultError as e:
            logger.error(f"❌ 未获取到提交记录: {e}")
            return EXIT_FAILURE
        except ReportError as e:
            logger.error(f"❌ 报告生成失败: {e}")
            return EXIT_FAILURE

        # --- 2. 输出 ---
        if self.context.output_file:
            if not report_builder.save_report(content, self.context.output_file):
                return EXIT_FAILURE
        else:
            self.stdout.write(content)
            self.stdout.flush()

        # --- 3. 上传 ---
        if self.context.publish:
            return self._publish(content)

        return EXIT_OK

    def _iter_log_lines(self) -> Iterator[str]:
        # 输出格式校验通过后才开始读取日志
        yield from self.data_source.get_log_lines()

    def _publish(self, content: str) -> int:
        publisher = ReportPublisher(
            self.context.server_url,
            timeout=self.global_config.PUBLISH_TIMEOUT,
            max_ttl=self.global_config.MAX_TTL,
        )
        document = to_html_document(content, self.context.output_format)
        try:
            published = publisher.publish(document, self.context.ttl)
        except PublishError as e:
            logger.error(f"❌ 上传报告失败: {e}")
            return EXIT_PUBLISH_FAILURE

        # stdout 只承载报告正文
        print(published.url, file=sys.stderr)
        return EXIT_OK
