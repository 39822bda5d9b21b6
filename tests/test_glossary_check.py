"""
Tests du check de glossaire.
"""

from subtitle_translator.quality import IssueType, Line, LintOptions, ScanContext, Severity
from subtitle_translator.quality.glossary_check import check_glossary

GLOSSARY = {"Nakama": "Companheiro", "Shinigami": "Deus da Morte"}


def _check(text: str, glossary=GLOSSARY):
    return check_glossary(Line(3, text), ScanContext("por", LintOptions(glossary=glossary)))


def test_inactive_without_glossary():
    assert _check("Meu nakama", glossary={}) == []


def test_term_left_untranslated():
    issues = _check("Você é meu nakama")

    assert len(issues) == 1
    issue = issues[0]
    assert issue.issue_type is IssueType.GLOSSARY_MISMATCH
    assert issue.severity is Severity.LOW
    assert issue.auto_fixable is False
    assert "Companheiro" in issue.suggestion


def test_expected_translation_present():
    assert _check("Nakama, meu companheiro") == []


def test_term_absent():
    assert _check("Olá, mundo!") == []


def test_one_issue_per_line():
    assert len(_check("Nakama e Shinigami")) == 1
