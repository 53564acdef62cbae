"""
[V1.3] 管道输入的提交过滤
git log 本身不会对 -i 读入的文本做过滤，这里按 --since/--until/--author 过滤 CommitRecord。
- 日期只接受 YYYY-MM-DD 开头的值 (预设总是生成这种格式)，边界按天包含
- 作者与 git --author 相同：正则表达式，匹配 "姓名 <邮箱>"
"""
import logging
import re
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Iterator, Optional, Pattern

from errors import InvalidFilterError
from models import CommitRecord

logger = logging.getLogger(__name__)

ISO_DATE_PATTERN = re.compile(r"^([0-9]{4}-[0-9]{2}-[0-9]{2})(?:[ T].*)?$")


def parse_bound(value: Optional[str], option: str) -> Optional[date]:
    """把 --since/--until 的值转换为日期，无法识别时抛出 InvalidFilterError"""
    if not value:
        return None
    message = f"{option} '{value}' must be an absolute date (YYYY-MM-DD) when reading log text with --input"
    match = ISO_DATE_PATTERN.match(value.strip())
    if not match:
        raise InvalidFilterError(message)
    try:
        return date.fromisoformat(match.group(1))
    except ValueError as e:
        raise InvalidFilterError(message) from e


@dataclass(frozen=True)
class CommitFilter:
    since: Optional[date] = None
    until: Optional[date] = None
    author: Optional[Pattern] = None

    @classmethod
    def build(
        cls,
        since: Optional[str] = None,
        until: Optional[str] = None,
        author: Optional[str] = None,
    ) -> "CommitFilter":
        author_pattern = None
        if author:
            try:
                author_pattern = re.compile(author)
            except re.error as e:
                raise InvalidFilterError(f"--author '{author}' is not a valid pattern: {e}") from e
        return cls(
            since=parse_bound(since, "--since"),
            until=parse_bound(until, "--until"),
            author=author_pattern,
        )

    @property
    def is_active(self) -> bool:
        return any([self.since, self.until, self.author])

    def matches(self, commit: CommitRecord) -> bool:
        if self.since and commit.date < self.since:
            return False
        if self.until and commit.date > self.until:
            return False
        if self.author and not self.author.search(
            f"{commit.author_name} <{commit.author_email}>"
        ):
            return False
        return True

    def apply(self, commits: Iterable[CommitRecord]) -> Iterator[CommitRecord]:
        kept = skipped = 0
        for commit in commits:
            if self.matches(commit):
                kept += 1
                yield commit
            else:
                skipped += 1
        if skipped:
            logger.info(f"🔍 过滤后保留 {kept} 个提交，跳过 {skipped} 个")
