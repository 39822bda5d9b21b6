"""
Tests du check d'équilibre des parenthèses et crochets.
"""

import pytest

from subtitle_translator.quality import IssueType, Line, LintOptions, ScanContext, Severity
from subtitle_translator.quality.bracket_check import (
    check_brackets,
    fix_brackets,
    scan_brackets,
)

CONTEXT = ScanContext("por", LintOptions())


def _check(text: str):
    return check_brackets(Line(1, text), CONTEXT)


class TestScanBrackets:
    """Tests pour scan_brackets()."""

    def test_balanced(self):
        result = scan_brackets("[Música] Olá (mundo)")
        assert result.stray_closers == []
        assert result.unclosed == []

    def test_nested_balanced(self):
        result = scan_brackets("([ok])")
        assert result.stray_closers == []
        assert result.unclosed == []

    def test_wrong_family_closer_is_stray(self):
        """`]` alors que le sommet est `(` : orpheline, la pile ne bouge pas."""
        result = scan_brackets("[(]")
        assert result.stray_closers == [2]
        assert result.unclosed == [0, 1]

    def test_closer_on_empty_stack(self):
        result = scan_brackets("fim)")
        assert result.stray_closers == [3]
        assert result.unclosed == []


class TestCheckBrackets:
    """Tests pour check_brackets()."""

    def test_unclosed_bracket(self):
        issues = _check("Isto é [colchete incompleto")

        assert len(issues) == 1
        assert issues[0].issue_type is IssueType.BRACKET_MISMATCH
        assert issues[0].severity is Severity.MEDIUM
        assert issues[0].auto_fixable is True
        assert issues[0].content == "[colchete incompleto"

    def test_doubled_opener_is_one_issue(self):
        issues = _check("Outra linha com ((problema aninhado")

        assert len(issues) == 1
        assert issues[0].content == "((problema aninhado"

    def test_separate_openers_are_separate_issues(self):
        assert len(_check("(um [dois")) == 2

    def test_stray_closer_window(self):
        issues = _check("Uma frase longa demais) e depois")

        assert len(issues) == 1
        assert ")" in issues[0].content
        assert len(issues[0].content) <= 21

    def test_issues_follow_text_order(self):
        """Orpheline en position 3, ouverture non fermée en position 0."""
        issues = _check("[a )b")
        assert [issue.content[0] for issue in issues] == ["[", "["]
        assert "Ouverture" in issues[0].suggestion
        assert "Fermeture" in issues[1].suggestion

    @pytest.mark.parametrize(
        "text",
        ["", "Sem colchetes", "[Música]", "(risos) [aplausos]", "{\\pos(1,2)}Olá"],
    )
    def test_clean_lines(self, text):
        assert _check(text) == []


class TestFixBrackets:
    """Tests pour fix_brackets()."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Isto é [colchete incompleto", "Isto é [colchete incompleto]"),
            ("Outra linha com ((problema", "Outra linha com ((problema))"),
            ("Olá)", "Olá"),
            ("[(]", "[()]"),
            ("[Música (suave", "[Música (suave)]"),
        ],
    )
    def test_fix(self, text, expected):
        assert fix_brackets(text, []) == expected

    def test_fixed_line_is_clean(self):
        fixed = fix_brackets("]) (a [b ) c", [])
        assert _check(fixed) == []

    def test_balanced_line_unchanged(self):
        assert fix_brackets("(risos) [aplausos]", []) == "(risos) [aplausos]"
