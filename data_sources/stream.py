import logging
import os
import sys
from typing import List, Optional

from .base import DataSource
from commit_filter import CommitFilter
from context import RunContext

logger = logging.getLogger(__name__)

STDIN_MARKER = "-"


class StreamDataSource(DataSource):
    """
    [V1.1] 管道/文件数据源
    读取一份已经生成好的 git log 文本 (文件路径，或 '-' 表示标准输入)。
    例如: git log --pretty=format:"%ad|%an|%ae|%s|%H" --date=short --numstat | python GitHistoryReport.py -i -
    """

    def __init__(self, context: RunContext):
        self.context = context
        self.input_path = context.input_path

    @property
    def is_stdin(self) -> bool:
        return self.input_path == STDIN_MARKER

    def validate(self) -> bool:
        if self.is_stdin:
            return True
        if not os.path.isfile(self.input_path):
            logger.error(f"❌ 输入文件不存在: {self.input_path}")
            return False
        return True

    def get_log_lines(self) -> List[str]:
        if self.is_stdin:
            logger.info("📥 正在从标准输入读取日志...")
            return sys.stdin.read().splitlines()
        try:
            with open(self.input_path, "r", encoding="utf-8", errors="replace") as f:
                lines = f.read().splitlines()
            logger.info(f"📥 已读取日志文件 {self.input_path} ({len(lines)} 行)")
            return lines
        except OSError as e:
            logger.error(f"❌ 读取日志文件失败 ({self.input_path}): {e}")
            return []

    def commit_filter(self) -> Optional[CommitFilter]:
        """读入的文本没有经过 git 过滤，在解析后按 since/until/author 过滤"""
        commit_filter = CommitFilter.build(
            since=self.context.since,
            until=self.context.until,
            author=self.context.author,
        )
        return commit_filter if commit_filter.is_active else None

    def describe(self) -> str:
        # 管道输入时仍以 --repo 指定的名称展示
        return os.path.basename(os.path.abspath(self.context.repo_path))
