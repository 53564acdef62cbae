"""
[V1.0] Git 日志解析
- classify_line: 把单行原始日志归类为 提交头 / 文件统计 / 二进制标记 / 噪声
- CommitReconstructor: 状态机，把归类后的行折叠为完整的 CommitRecord

输入格式 (git log --pretty=format:"%ad|%an|%ae|%s|%H" --date=short --numstat):
    2025-09-01|alice|alice@example.com|fix: parser|3f2a...
    12<TAB>3<TAB>src/parser.py
    -<TAB>-<TAB>assets/logo.png

提交标题中可能出现 '|'：以 日期/作者/邮箱 (前三个字段) 与 哈希 (最后一个字段) 为锚点，
中间的所有内容都归入标题。
"""
import logging
import re
from datetime import date
from typing import Iterable, Iterator, Optional

from models import (
    BinaryMarkerLine,
    ClassifiedLine,
    CommitRecord,
    FileStatLine,
    HeaderLine,
    LineKind,
    NoiseLine,
)

logger = logging.getLogger(__name__)

HEADER_SEPARATOR = "|"
STAT_SEPARATOR = "\t"
HEADER_FIELD_COUNT = 5
STAT_FIELD_COUNT = 3

DATE_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
COUNT_PATTERN = re.compile(r"^[0-9]+$")
BINARY_FIELD = "-"


def _parse_header(line: str) -> Optional[HeaderLine]:
    parts = line.split(HEADER_SEPARATOR)
    if len(parts) < HEADER_FIELD_COUNT or not DATE_PATTERN.match(parts[0]):
        return None
    try:
        commit_date = date.fromisoformat(parts[0])
    except ValueError:
        return None
    return HeaderLine(
        date=commit_date,
        author_name=parts[1],
        author_email=parts[2],
        subject=HEADER_SEPARATOR.join(parts[3:-1]),
        commit_hash=parts[-1].strip(),
    )


def classify_line(line: str) -> ClassifiedLine:
    """
    对单行日志进行归类 (纯函数，不会抛出异常)。
    无法识别的行一律作为 NoiseLine 返回。
    """
    line = line.rstrip("\r\n")
    if not line.strip():
        return NoiseLine(raw=line)

    fields = line.split(STAT_SEPARATOR)
    if len(fields) == STAT_FIELD_COUNT:
        added, removed, path = fields
        if COUNT_PATTERN.match(added) and COUNT_PATTERN.match(removed):
            return FileStatLine(
                lines_added=int(added), lines_removed=int(removed), path=path
            )
        if added == BINARY_FIELD and removed == BINARY_FIELD:
            return BinaryMarkerLine(path=path)

    header = _parse_header(line)
    if header is not None:
        return header

    return NoiseLine(raw=line)


class CommitReconstructor:
    """
    Idle / InCommit 两状态的折叠器。
    - 提交头: 若已有打开的提交则先关闭并输出，再打开新提交
    - 文件统计 / 二进制标记: 累加到打开的提交上 (Idle 状态下丢弃)
    - 流结束: 关闭并输出最后一个提交
    """

    def __init__(self):
        self._header: Optional[HeaderLine] = None
        self._added = 0
        self._removed = 0
        self.discarded_lines = 0
        self.noise_lines = 0

    @property
    def in_commit(self) -> bool:
        return self._header is not None

    def feed(self, classified: ClassifiedLine) -> Optional[CommitRecord]:
        """处理一行，若因此关闭了一个提交则返回它"""
        if classified.kind is LineKind.HEADER:
            closed = self._close()
            self._header = classified
            return closed

        if classified.kind is LineKind.NOISE:
            self.noise_lines += 1
            return None

        if not self.in_commit:
            # 出现在任何提交头之前的统计行
            self.discarded_lines += 1
            return None

        if classified.kind is LineKind.FILE_STAT:
            self._added += classified.lines_added
            self._removed += classified.lines_removed
        elif classified.kind is LineKind.BINARY_MARKER:
            self._added += 1
        return None

    def finish(self) -> Optional[CommitRecord]:
        """流结束时调用"""
        return self._close()

    def _close(self) -> Optional[CommitRecord]:
        if self._header is None:
            return None
        header = self._header
        record = CommitRecord(
            date=header.date,
            author_name=header.author_name,
            author_email=header.author_email,
            subject=header.subject,
            commit_hash=header.commit_hash,
            lines_added=self._added,
            lines_removed=self._removed,
        )
        self._header = None
        self._added = 0
        self._removed = 0
        return record


def iter_commits(lines: Iterable[str]) -> Iterator[CommitRecord]:
    """逐行读取日志，按提交头出现的顺序产出 CommitRecord"""
    reconstructor = CommitReconstructor()
    for line in lines:
        record = reconstructor.feed(classify_line(line))
        if record is not None:
            yield record
    last = reconstructor.finish()
    if last is not None:
        yield last

    if reconstructor.discarded_lines:
        logger.debug(f"丢弃了 {reconstructor.discarded_lines} 行位于提交头之前的统计行")
    if reconstructor.noise_lines:
        logger.debug(f"忽略了 {reconstructor.noise_lines} 行噪声")
