"""
报告生成过程中的异常类型。
解析层的异常行不会抛出异常 (按噪声丢弃)，只有面向调用方的入口才会抛出以下异常。
"""
from typing import Optional


class ReportError(Exception):
    """所有报告相关异常的基类"""


class EmptyResultError(ReportError):
    """过滤后没有任何提交记录"""

    def __init__(self, message: str = "No commits found in the specified range"):
        super().__init__(message)


class UnsupportedFormatError(ReportError):
    """请求了不支持的输出格式"""

    def __init__(self, output_format: str, supported=("ascii", "markdown", "html")):
        self.output_format = output_format
        self.supported = tuple(supported)
        super().__init__(
            f"Invalid format '{output_format}'. Supported formats: {', '.join(self.supported)}"
        )


class UnknownPresetError(ReportError):
    """未知的日期预设"""

    def __init__(self, preset: str, available=()):
        self.preset = preset
        self.available = tuple(available)
        message = f"Unknown preset '{preset}'"
        if self.available:
            message += f". Available presets: {', '.join(self.available)}"
        super().__init__(message)


class InvalidFilterError(ReportError):
    """过滤条件无法应用到管道输入的日志上"""


class PublishError(ReportError):
    """上传报告到报告服务器失败"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)
