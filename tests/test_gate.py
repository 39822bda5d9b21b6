"""
Tests du QualityGate : inspection, auto-fix vérifié et politique de retry.
"""

import logging

from subtitle_translator import LintOptions, QualityGate, Result, Severity
from subtitle_translator.quality import Issue, IssueType


class TestInspect:
    def test_clean_batch(self):
        gate = QualityGate()
        assert gate.inspect(["Olá, mundo!"], "por").passed_all is True

    def test_failing_batch_is_logged(self, scenario_lines, caplog):
        with caplog.at_level(logging.INFO, logger="subtitle_translator.gate"):
            result = QualityGate().inspect(scenario_lines, "por")

        assert len(result) == 6
        assert "6 issue(s)" in caplog.text

    def test_options_are_forwarded(self):
        gate = QualityGate(LintOptions(punctuation_threshold=4))
        assert gate.inspect(["Não!!!"], "por").passed_all is True


class TestAutoFix:
    def test_scenario_outcome(self, scenario_lines):
        gate = QualityGate()
        outcome = gate.auto_fix(scenario_lines, "por")

        assert outcome.changed_line_ids == [2, 3, 4, 7, 8]
        assert len(outcome.before) == 6
        assert len(outcome.after) == 1
        assert outcome.resolved_count == 5
        assert outcome.remaining_issues[0].issue_type is IssueType.RESIDUAL_LANGUAGE
        assert outcome.original == tuple(scenario_lines)

    def test_reuses_given_result(self, scenario_lines):
        gate = QualityGate()
        result = gate.inspect(scenario_lines, "por")
        outcome = gate.auto_fix(scenario_lines, "por", result)
        assert outcome.before is result

    def test_nothing_to_fix(self):
        outcome = QualityGate().auto_fix(["Olá friend"], "por")
        assert outcome.changed_line_ids == []
        assert outcome.repaired == ("Olá friend",)
        assert outcome.resolved_count == 0

    def test_logs_summary(self, scenario_lines, caplog):
        with caplog.at_level(logging.INFO, logger="subtitle_translator.gate"):
            QualityGate().auto_fix(scenario_lines, "por")
        assert "5 ligne(s) modifiée(s)" in caplog.text


class TestShouldRetry:
    def test_retry_on_broken_tag(self, scenario_lines):
        result = QualityGate().inspect(scenario_lines, "por")
        assert QualityGate.should_retry(result) is True

    def test_no_retry_without_high(self):
        result = QualityGate().inspect(["Não!!! [Sim", "Olá friend"], "por")
        assert result.passed_all is False
        assert QualityGate.should_retry(result) is False

    def test_no_retry_when_clean(self):
        assert QualityGate.should_retry(Result()) is False


class TestSummary:
    def test_clean(self):
        assert QualityGate.summary(Result()) == "aucune issue"

    def test_scenario(self, scenario_lines):
        result = QualityGate().inspect(scenario_lines, "por")
        assert QualityGate.summary(result) == "6 issue(s) (HIGH: 1, MED: 3, LOW: 2)"

    def test_zero_counts_are_listed(self):
        result = Result(issues=(Issue.create(1, IssueType.BROKEN_TAG, "{\\an8"),))
        assert result.has_severity(Severity.HIGH)
        assert QualityGate.summary(result) == "1 issue(s) (HIGH: 1, MED: 0, LOW: 0)"
