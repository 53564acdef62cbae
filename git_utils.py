import logging
import subprocess
from typing import List, Optional

from config import GlobalConfig

logger = logging.getLogger(__name__)


def run_git_command(
    args: List[str], repo_path: str, timeout: int = 120, context: str = "执行Git命令"
) -> Optional[str]:
    """
    统一的Git命令执行函数
    - 以参数列表调用 (不经过 shell，作者名等参数无需转义)
    - 失败时记录日志并返回 None
    """
    cmd = ["git", "-C", repo_path] + args
    try:
        logger.info(f"在 {repo_path} 中执行命令: {' '.join(cmd)}")
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
        )
        if result.returncode != 0:
            logger.error(f"{context}失败: {result.stderr.strip()}")
            return None
        logger.info(f"{context}成功，输出 {len(result.stdout.splitlines())} 行")
        return result.stdout
    except subprocess.TimeoutExpired:
        logger.error(f"{context}超时")
        return None
    except OSError as e:
        logger.error(f"{context}出错: {e}")
        return None


def is_git_repository(repo_path: str) -> bool:
    """检查指定路径是否为Git仓库"""
    output = run_git_command(
        ["rev-parse", "--is-inside-work-tree"], repo_path, context="检查Git仓库"
    )
    return output is not None and output.strip() == "true"


def build_log_args(
    global_config: GlobalConfig,
    since: Optional[str] = None,
    until: Optional[str] = None,
    author: Optional[str] = None,
) -> List[str]:
    """组装 git log 参数 (提交头 + numstat)"""
    args = [
        "log",
        f"--pretty=format:{global_config.GIT_LOG_PRETTY_FORMAT}",
        "--date=short",
        "--numstat",
    ]
    if since:
        args.append(f"--since={since}")
    if until:
        args.append(f"--until={until}")
    if author:
        args.append(f"--author={author}")
    return args


def get_git_log(
    repo_path: str,
    global_config: GlobalConfig,
    since: Optional[str] = None,
    until: Optional[str] = None,
    author: Optional[str] = None,
) -> Optional[str]:
    """获取带文件统计的Git提交历史"""
    args = build_log_args(global_config, since=since, until=until, author=author)
    return run_git_command(
        args, repo_path, timeout=global_config.GIT_TIMEOUT, context="获取Git提交历史"
    )
