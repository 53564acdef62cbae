"""
[V1.0] 全局配置
[V1.2] 新增报告服务器 (上传/TTL) 配置
"""
import logging
import os
from dotenv import load_dotenv

logger = logging.getLogger(__name__)


# --- 脚本基础路径 ---
SCRIPT_BASE_PATH = os.path.abspath(os.path.dirname(__file__))
env_path = os.path.join(SCRIPT_BASE_PATH, ".env")
if os.path.exists(env_path):
    load_dotenv(env_path)
    logger.info(f"✅ 已从脚本目录加载 .env: {env_path}")
else:
    load_dotenv()
    logger.debug("⚠️ 未在脚本目录找到 .env，尝试从 CWD 加载。")


class GlobalConfig:
    """
    Git 历史报告的全局应用配置。
    """

    # --- 路径配置 ---
    SCRIPT_BASE_PATH: str = SCRIPT_BASE_PATH
    TEMPLATES_DIR_NAME: str = "templates"
    HTML_TEMPLATE_NAME: str = "report.html.j2"
    CSS_FILE_NAME: str = "styles.css"

    # --- Git 命令格式 ---
    # 提交头: 日期|作者|邮箱|标题|哈希; 文件统计: 新增<TAB>删除<TAB>路径
    GIT_LOG_PRETTY_FORMAT: str = "%ad|%an|%ae|%s|%H"
    GIT_TIMEOUT: int = 120

    # --- 输出格式 ---
    DEFAULT_FORMAT: str = "ascii"
    SUPPORTED_FORMATS: tuple = ("ascii", "markdown", "html")

    # --- 截断宽度 (作者, 提交标题) ---
    ASCII_AUTHOR_WIDTH: int = 20
    ASCII_SUBJECT_WIDTH: int = 72
    MARKDOWN_AUTHOR_WIDTH: int = 15
    MARKDOWN_SUBJECT_WIDTH: int = 60
    HTML_AUTHOR_WIDTH: int = 20
    HTML_SUBJECT_WIDTH: int = 80

    # =================================================================
    # --- [V1.2] 报告服务器配置 ---
    # =================================================================
    REPORT_SERVER_URL: str = os.getenv(
        "GIT_REPORT_SERVER_URL", "http://localhost:3001"
    )
    DEFAULT_TTL: int = 3600
    MAX_TTL: int = 86400
    PUBLISH_TIMEOUT: int = 30

    @property
    def templates_path(self) -> str:
        return os.path.join(self.SCRIPT_BASE_PATH, self.TEMPLATES_DIR_NAME)
