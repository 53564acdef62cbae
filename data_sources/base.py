from abc import ABC, abstractmethod
from typing import Iterable, Optional

from commit_filter import CommitFilter


class DataSource(ABC):
    """
    [V1.0] 数据源抽象基类
    定义了获取原始日志行的标准接口，屏蔽了底层是本地 Git 仓库还是管道输入的差异。
    """

    @abstractmethod
    def validate(self) -> bool:
        """
        验证数据源是否可用。
        例如：本地路径是否存在且为 Git 仓库，或者输入文件是否存在。
        """
        pass

    @abstractmethod
    def get_log_lines(self) -> Iterable[str]:
        """
        返回 git log --numstat 格式的原始日志行。
        失败时返回空序列，由调用方作为“无提交”处理。
        """
        pass

    @abstractmethod
    def describe(self) -> str:
        """报告中显示的仓库名称"""
        pass

    def commit_filter(self) -> Optional[CommitFilter]:
        """
        需要在解析后再过滤提交时返回 CommitFilter。
        默认返回 None (例如 git log 已经按条件过滤过)。
        """
        return None
