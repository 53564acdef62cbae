import logging
import sys
import unicodedata


# 将日志配置移到这里，作为一个可被调用的函数
def setup_logging(level: int = logging.INFO):
    """配置全局日志 (输出到 stderr，stdout 留给报告正文)"""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def format_number(value: int) -> str:
    """千分位格式化: 12345 -> '12,345'"""
    return f"{value:,}"


def format_signed(value: int) -> str:
    """带符号的千分位格式化，非负数显示 '+': 0 -> '+0', -1200 -> '-1,200'"""
    return f"{value:+,}"


def char_width(char: str) -> int:
    """单个字符在终端中占用的列数"""
    if unicodedata.combining(char):
        return 0
    if unicodedata.east_asian_width(char) in ("W", "F"):
        return 2
    return 1


def display_width(text: str) -> int:
    """字符串在终端中的显示宽度 (中日韩全角字符按 2 列计算)"""
    return sum(char_width(c) for c in text)


def truncate(text: str, max_width: int, ellipsis: str = "...") -> str:
    """
    按显示宽度截断字符串，超长时以省略号结尾。
    返回值的显示宽度不超过 max_width。
    """
    text = " ".join(text.split())
    if display_width(text) <= max_width:
        return text
    limit = max(max_width - display_width(ellipsis), 0)
    result = []
    used = 0
    for char in text:
        width = char_width(char)
        if used + width > limit:
            break
        result.append(char)
        used += width
    return "".join(result) + ellipsis


def pad(text: str, width: int, align: str = "left") -> str:
    """按显示宽度补齐空格"""
    fill = " " * max(width - display_width(text), 0)
    if align == "right":
        return fill + text
    if align == "center":
        left = len(fill) // 2
        return fill[:left] + text + fill[left:]
    return text + fill
