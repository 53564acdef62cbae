import random
import unittest
from datetime import date

import heuristics
from aggregator import aggregate_commits
from log_parser import iter_commits

SCENARIO_LOG = [
    "2025-09-01|alice|alice@example.com|feat: parser|aaa111",
    "480\t10\tsrc/a.py",
    "20\t0\tsrc/b.py",
    "",
    "2025-09-01|bob|bob@example.com|docs: readme|bbb222",
    "20\t5\tREADME.md",
    "",
    "2025-09-02|alice|alice@example.com|refactor: rename|ccc333",
    "5\t5\tsrc/a.py",
]


def random_log(seed: int, commit_count: int = 40):
    """生成随机但格式正确的日志行"""
    rng = random.Random(seed)
    authors = ["alice", "bob", "carol", "张三"]
    lines = []
    for i in range(commit_count):
        day = date(2025, 9, rng.randint(1, 9)).isoformat()
        author = rng.choice(authors)
        lines.append(f"{day}|{author}|{author}@example.com|change {i} | part|h{i:04d}")
        for _ in range(rng.randint(0, 4)):
            if rng.random() < 0.2:
                lines.append(f"-\t-\tbin{i}.png")
            else:
                lines.append(f"{rng.randint(0, 900)}\t{rng.randint(0, 900)}\tf{i}.py")
        lines.append("")
    return lines


class TestAggregator(unittest.TestCase):

    def test_scenario_totals(self):
        report = aggregate_commits(iter_commits(SCENARIO_LOG))
        self.assertEqual(report.summary.total_commits, 3)
        self.assertEqual(report.summary.total_lines_added, 525)
        self.assertEqual(report.summary.total_lines_removed, 20)
        self.assertEqual(report.summary.net_lines, 505)

    def test_scenario_daily(self):
        report = aggregate_commits(iter_commits(SCENARIO_LOG))
        first = report.daily[date(2025, 9, 1)]
        self.assertEqual(first.commit_count, 2)
        self.assertEqual(first.distinct_author_count, 2)
        self.assertEqual(first.net_lines, 505)
        self.assertEqual(heuristics.classify_activity(first.net_lines).label, "Low")

        second = report.daily[date(2025, 9, 2)]
        self.assertEqual(second.commit_count, 1)
        self.assertEqual(second.net_lines, 0)
        self.assertEqual(heuristics.classify_activity(second.net_lines).label, "Balanced")

    def test_scenario_contributors(self):
        report = aggregate_commits(iter_commits(SCENARIO_LOG))
        alice = report.contributors["alice"]
        bob = report.contributors["bob"]
        self.assertEqual((alice.commit_count, alice.net_lines), (2, 490))
        self.assertEqual((bob.commit_count, bob.net_lines), (1, 15))
        self.assertEqual(heuristics.classify_role(alice.net_lines).label, "Regular Contributor")
        self.assertEqual(heuristics.classify_role(bob.net_lines).label, "Minor Contributor")

    def test_repeat_author_counted_once_per_day(self):
        lines = [
            "2025-09-01|alice|a@x|one|a1",
            "1\t0\tx",
            "2025-09-01|alice|a@x|two|a2",
            "2\t0\tx",
            "2025-09-01|alice|a@x|three|a3",
        ]
        report = aggregate_commits(iter_commits(lines))
        day = report.daily[date(2025, 9, 1)]
        self.assertEqual(day.commit_count, 3)
        self.assertEqual(day.distinct_author_count, 1)

    def test_keys_keep_first_encounter_order(self):
        lines = [
            "2025-09-03|carol|c@x|c|c1",
            "2025-09-01|alice|a@x|a|a1",
            "2025-09-03|bob|b@x|b|b1",
        ]
        report = aggregate_commits(iter_commits(lines))
        self.assertEqual(list(report.contributors), ["carol", "alice", "bob"])
        self.assertEqual(list(report.daily), [date(2025, 9, 3), date(2025, 9, 1)])
        self.assertEqual([c.commit_hash for c in report.commits], ["c1", "a1", "b1"])

    def test_empty_input(self):
        report = aggregate_commits([])
        self.assertEqual(report.summary.total_commits, 0)
        self.assertEqual(report.daily, {})
        self.assertEqual(report.contributors, {})
        self.assertIsNone(report.peak_day)
        self.assertEqual(report.average_commits_per_day, 0.0)

    def test_invariants_hold_for_random_logs(self):
        for seed in range(10):
            with self.subTest(seed=seed):
                commits = list(iter_commits(random_log(seed)))
                report = aggregate_commits(commits)
                summary = report.summary

                self.assertEqual(summary.total_commits, len(commits))
                self.assertEqual(summary.total_commits, sum(d.commit_count for d in report.daily.values()))
                self.assertEqual(summary.total_commits, sum(c.commit_count for c in report.contributors.values()))

                self.assertEqual(summary.total_lines_added, sum(c.lines_added for c in commits))
                self.assertEqual(summary.total_lines_added, sum(c.lines_added for c in report.contributors.values()))
                self.assertEqual(summary.total_lines_added, sum(d.lines_added for d in report.daily.values()))
                self.assertEqual(summary.total_lines_removed, sum(c.lines_removed for c in commits))
                self.assertEqual(summary.total_lines_removed, sum(c.lines_removed for c in report.contributors.values()))

                for day in report.daily.values():
                    self.assertLessEqual(day.distinct_author_count, day.commit_count)

    def test_velocity_figures(self):
        lines = [
            "2025-09-01|alice|a@x|a|a1",
            "100\t0\tx",
            "2025-09-02|bob|b@x|b|b1",
            "300\t0\tx",
            "2025-09-02|bob|b@x|b|b2",
            "2025-09-03|bob|b@x|c|c1",
            "300\t250\tx",
        ]
        report = aggregate_commits(iter_commits(lines))
        self.assertEqual(report.active_days, 3)
        self.assertEqual(report.average_commits_per_day, 1.3)
        # 新增行数相同时取较早的日期
        self.assertEqual(report.peak_day, date(2025, 9, 2))


if __name__ == "__main__":
    unittest.main()
