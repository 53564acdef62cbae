"""
[V1.0] 运行时配置的数据模型
"""
from dataclasses import dataclass
from typing import Optional
from config import GlobalConfig


@dataclass
class RunContext:
    """
    封装一次运行所需的所有配置和状态。
    这是从 CLI 传递到 Orchestrator 的唯一对象。
    """

    # --- 数据来源 ---
    repo_path: str
    input_path: Optional[str]

    # --- 范围参数 ---
    since: Optional[str]
    until: Optional[str]
    preset: Optional[str]
    author: Optional[str]

    # --- 报告参数 ---
    output_format: str
    detailed: bool
    output_file: Optional[str]

    # --- 上传参数 ---
    publish: bool
    ttl: int
    server_url: str

    # --- 全局配置 ---
    # 包含常量和 .env 加载的数据
    global_config: GlobalConfig
