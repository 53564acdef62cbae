import logging
from context import RunContext
from .base import DataSource
from .local_git import LocalGitDataSource
from .stream import StreamDataSource

logger = logging.getLogger(__name__)


def get_data_source(context: RunContext) -> DataSource:
    """
    [V1.1] 数据源工厂
    指定了 --input 时读取现成的日志文本，否则在本地仓库中执行 git log。
    """
    if context.input_path:
        logger.info(f"🔌 [Factory] 初始化数据源: Stream ({context.input_path})")
        return StreamDataSource(context)

    logger.info("🔌 [Factory] 初始化数据源: Local Git")
    return LocalGitDataSource(context)
