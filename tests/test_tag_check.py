"""
Tests du check des balises d'override ASS.
"""

from subtitle_translator.quality import IssueType, Line, LintOptions, ScanContext, Severity
from subtitle_translator.quality import tag_check
from subtitle_translator.quality.tag_check import (
    check_tags,
    find_unterminated_tags,
    fix_tags,
)

CONTEXT = ScanContext("por", LintOptions())


class TestFindUnterminatedTags:
    """Tests pour find_unterminated_tags()."""

    def test_closed_tag_at_start(self):
        assert find_unterminated_tags("{\\an8}Texto") == []

    def test_closed_tag_at_end(self):
        assert find_unterminated_tags("Linha normal {\\an8}") == []

    def test_unterminated_tag(self):
        assert find_unterminated_tags("{\\an8Texto sem fechamento") == [0]

    def test_unterminated_after_closed_tag(self):
        """Une balise fermée puis une balise ouverte : seule la seconde compte."""
        text = "{\\i1}Olá{\\i0 mundo"
        assert find_unterminated_tags(text) == [text.index("{\\i0")]

    def test_brace_without_backslash_is_ignored(self):
        assert find_unterminated_tags("Conjunto {a, b") == []

    def test_two_openers_report_once(self):
        """La première ouverture non fermée consomme le reste de la ligne."""
        assert find_unterminated_tags("{\\b1 gras {\\i1 italique") == [0]

    def test_empty_text(self):
        assert find_unterminated_tags("") == []


class TestCheckTags:
    """Tests pour check_tags()."""

    def test_issue_fields(self):
        issues = check_tags(Line(2, "Olá {\\pos(10,20) mundo"), CONTEXT)

        assert len(issues) == 1
        issue = issues[0]
        assert issue.line_id == 2
        assert issue.issue_type is IssueType.BROKEN_TAG
        assert issue.severity is Severity.HIGH
        assert issue.auto_fixable is True
        assert issue.content == "{\\pos(10,20) mundo"

    def test_clean_line(self):
        assert check_tags(Line(1, "{\\an8}Olá"), CONTEXT) == []


class TestFixTags:
    """Tests pour fix_tags()."""

    def test_appends_closing_brace(self):
        assert fix_tags("{\\an8Texto", []) == "{\\an8Texto}"

    def test_fixed_line_is_clean(self):
        fixed = fix_tags("{\\b1 gras {\\i1 italique", [])
        assert find_unterminated_tags(fixed) == []

    def test_clean_line_unchanged(self):
        assert fix_tags("{\\an8}Olá", []) == "{\\an8}Olá"


def test_module_doc_keeps_tag_syntax():
    """La doc du module montre `{\\an8}` tel quel (pas de caractère de contrôle)."""
    assert "{\\an8}" in tag_check.__doc__
    assert "\a" not in tag_check.__doc__
