"""
[V1.0] 分类启发式规则
活跃度 / 贡献者角色 / 开发模式 均以有序阈值表声明：
取净变更行数严格大于 (>) 的最高阈值，边界值落入较低的档位。
"""
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple


@dataclass(frozen=True)
class ActivityLevel:
    label: str
    title: str
    intensity: int
    css_class: str
    emoji: str

    @property
    def badge(self) -> str:
        """Markdown/HTML 使用的展示文本，例如 '🔥🔥🔥 Moderate Activity'"""
        return f"{self.emoji * max(self.intensity, 1)} {self.title}"


@dataclass(frozen=True)
class ContributorRole:
    label: str
    description: str


# (阈值, 档位)，按阈值从高到低排列
ACTIVITY_THRESHOLDS: Tuple[Tuple[int, ActivityLevel], ...] = (
    (10000, ActivityLevel("Peak", "Peak Development", 5, "activity-peak", "🔥")),
    (5000, ActivityLevel("High", "High Activity", 4, "activity-high", "🔥")),
    (1000, ActivityLevel("Moderate", "Moderate Activity", 3, "activity-moderate", "🔥")),
    (100, ActivityLevel("Low", "Low Activity", 2, "activity-low", "🔥")),
    (0, ActivityLevel("Minimal", "Minimal Activity", 1, "activity-minimal", "🔥")),
)
BALANCED = ActivityLevel("Balanced", "Balanced Changes", 0, "activity-balanced", "⚖️")
CLEANUP = ActivityLevel("Cleanup", "Code Cleanup", 0, "activity-cleanup", "🧹")

ROLE_THRESHOLDS: Tuple[Tuple[int, ContributorRole], ...] = (
    (15000, ContributorRole("Foundation Builder", "Project infrastructure and initial setup")),
    (5000, ContributorRole("Lead Developer", "Major features and architectural decisions")),
    (1000, ContributorRole("Feature Contributor", "Significant feature additions and improvements")),
    (100, ContributorRole("Regular Contributor", "Bug fixes and small enhancements")),
)
MINOR_CONTRIBUTOR = ContributorRole("Minor Contributor", "Documentation and small fixes")

PATTERN_THRESHOLDS: Tuple[Tuple[int, str], ...] = (
    (10000, "Foundation/Major Refactor"),
    (5000, "Feature Development"),
    (1000, "Enhancement Phase"),
    (0, "Maintenance/Bug Fixes"),
)
CLEANUP_PATTERN = "Code Cleanup/Refactoring"

RANK_BADGES = {1: "🏆", 2: "🥈", 3: "🥉"}
DEFAULT_RANK_BADGE = "🏅"


def match_threshold(value: int, table: Sequence[Tuple[int, object]]) -> Optional[object]:
    """返回 value 严格大于的第一个 (最高) 阈值对应的档位，没有则返回 None"""
    for threshold, bracket in table:
        if value > threshold:
            return bracket
    return None


def classify_activity(net_lines: int) -> ActivityLevel:
    """按单日净变更行数判定活跃度"""
    level = match_threshold(net_lines, ACTIVITY_THRESHOLDS)
    if level is not None:
        return level
    return BALANCED if net_lines == 0 else CLEANUP


def classify_role(net_lines: int) -> ContributorRole:
    """按贡献者净变更行数判定角色"""
    return match_threshold(net_lines, ROLE_THRESHOLDS) or MINOR_CONTRIBUTOR


def classify_pattern(net_lines: int) -> str:
    """速度分析中的单日开发模式"""
    return match_threshold(net_lines, PATTERN_THRESHOLDS) or CLEANUP_PATTERN


def rank_badge(rank: int) -> str:
    return RANK_BADGES.get(rank, DEFAULT_RANK_BADGE)
