"""
[V1.1] 日期预设 -> git --since/--until 参数
"""
from datetime import date, timedelta
from typing import Dict, Optional, Tuple

from errors import UnknownPresetError

DAY_START = "00:00:00"
DAY_END = "23:59:59"

# 滚动窗口预设: 名称 -> 天数
ROLLING_PRESETS: Dict[str, int] = {
    "last-week": 7,
    "last-2-weeks": 14,
    "sprint": 14,
    "last-month": 30,
    "last-3-months": 90,
    "quarter": 90,
    "last-6-months": 180,
    "last-year": 365,
}

AVAILABLE_PRESETS = (
    "today",
    "yesterday",
    "last-week",
    "this-week",
    "last-2-weeks",
    "last-month",
    "this-month",
    "last-3-months",
    "last-6-months",
    "last-year",
    "this-year",
    "sprint",
    "quarter",
)


def _start_of(day: date) -> str:
    return f"{day.isoformat()} {DAY_START}"


def _end_of(day: date) -> str:
    return f"{day.isoformat()} {DAY_END}"


def resolve_preset(preset: str, today: Optional[date] = None) -> Tuple[str, str]:
    """
    把预设名称转换为 (since, until)。
    :param today: 用于测试的“今天”，默认取系统日期
    """
    today = today or date.today()
    name = preset.strip().lower()

    if name == "today":
        return _start_of(today), _end_of(today)
    if name == "yesterday":
        yesterday = today - timedelta(days=1)
        return _start_of(yesterday), _end_of(yesterday)
    if name == "this-week":
        monday = today - timedelta(days=today.weekday())
        return _start_of(monday), _end_of(today)
    if name == "this-month":
        return _start_of(today.replace(day=1)), _end_of(today)
    if name == "this-year":
        return _start_of(today.replace(month=1, day=1)), _end_of(today)
    if name in ROLLING_PRESETS:
        start = today - timedelta(days=ROLLING_PRESETS[name])
        return start.isoformat(), _end_of(today)

    raise UnknownPresetError(preset, AVAILABLE_PRESETS)
