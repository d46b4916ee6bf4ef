"""
evaluators/pythonChecker.py
----------------------------
Line-local syntax heuristics for Python submissions. Works on raw text only
(no ast.parse) so that half-typed snippets still get targeted hints.

Rules, applied to every non-blank, non-comment line in this order:
  1. Python 2 print statement      - print "x" instead of print("x")
  2. Missing colon on block header - if/elif/for/while/def/class/try/except/with
  3. Missing colon on else/finally
  4. Assignment in a condition     - if x = 5
  5. len / range without call parentheses
  6. Bracket balance on the line   - (), [], {} checked independently

Every diagnostic carries the 1-based line number and a hint.
"""

import re

from evaluators.diagnostics import Diagnostic, SEVERITY_ERROR
from evaluators.ruleTables import LineRule, applyLineRules


# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

PRINT_STATEMENT_PATTERN  = re.compile(r"\bprint\s+[^(]")
BLOCK_KEYWORD_PATTERN    = re.compile(r"^\s*(if|elif|else|for|while|def|class|try|except|finally|with)\b")
LEADING_WORD_PATTERN     = re.compile(r"^\s*(\w+)")
ELSE_FINALLY_PATTERN     = re.compile(r"^\s*(else|finally)\s*")
CONDITION_ASSIGNMENT     = re.compile(r"\b(if|elif|while|for)\b.*[^!=<>]\s=\s[^=]")
CONDITION_KEYWORD        = re.compile(r"\b(if|elif|while|for)\b")
LEN_WITHOUT_CALL         = re.compile(r"\blen\s+\w+")
RANGE_WITHOUT_CALL       = re.compile(r"\brange\s+\w+")

COLON_EXEMPT_KEYWORDS = ("else", "finally")

# (kind, opening, closing)
BRACKET_PAIRS = (
    ("parentheses", "(", ")"),
    ("brackets",    "[", "]"),
    ("braces",      "{", "}"),
)


# ---------------------------------------------------------------------------
# Individual rules
# ---------------------------------------------------------------------------

def _isPrintStatement(line: str, trimmed: str) -> bool:
    return PRINT_STATEMENT_PATTERN.search(trimmed) is not None and "print(" not in trimmed


def _printStatement(line: str, trimmed: str, lineNo: int) -> Diagnostic:
    return Diagnostic(
        message="'print' statement without parentheses - use print() not print",
        severity=SEVERITY_ERROR,
        hint='Python 3 requires parentheses. Use: print("text") instead of print "text"',
        line=lineNo,
    )


def _leadingKeyword(trimmed: str) -> str:
    match = LEADING_WORD_PATTERN.match(trimmed)
    return match.group(1) if match else ""


def _isBlockHeaderMissingColon(line: str, trimmed: str) -> bool:
    if not BLOCK_KEYWORD_PATTERN.match(line) or trimmed.endswith(":"):
        return False
    # else/finally are reported by their own rule
    return _leadingKeyword(trimmed) not in COLON_EXEMPT_KEYWORDS


def _blockHeaderMissingColon(line: str, trimmed: str, lineNo: int) -> Diagnostic:
    keyword = _leadingKeyword(trimmed)
    return Diagnostic(
        message=f"'{keyword}' statement must end with a colon (:)",
        severity=SEVERITY_ERROR,
        hint=f"Add a ':' at the end of the '{keyword}' line",
        line=lineNo,
    )


def _isElseFinallyMissingColon(line: str, trimmed: str) -> bool:
    return ELSE_FINALLY_PATTERN.match(line) is not None and not trimmed.endswith(":")


def _elseFinallyMissingColon(line: str, trimmed: str, lineNo: int) -> Diagnostic:
    keyword = re.split(r"\s", trimmed)[0]
    return Diagnostic(
        message=f"'{keyword}' statement must end with a colon (:)",
        severity=SEVERITY_ERROR,
        hint=f"Use: {keyword}: (with colon)",
        line=lineNo,
    )


def _isAssignmentInCondition(line: str, trimmed: str) -> bool:
    return CONDITION_ASSIGNMENT.search(trimmed) is not None


def _assignmentInCondition(line: str, trimmed: str, lineNo: int) -> Diagnostic:
    match   = CONDITION_KEYWORD.search(trimmed)
    keyword = match.group(1) if match else "conditional"
    return Diagnostic(
        message=f"Possible assignment (=) instead of comparison (==) in {keyword} condition",
        severity=SEVERITY_ERROR,
        hint="Use == for comparison instead of = for assignment. For example: if x == 5 not if x = 5",
        line=lineNo,
    )


def _builtinCallRule(name: str, pattern: re.Pattern, example: str) -> LineRule:
    """len/range written like a statement keyword (`len items`)."""
    def predicate(line: str, trimmed: str) -> bool:
        return pattern.search(trimmed) is not None and f"{name}(" not in trimmed

    def build(line: str, trimmed: str, lineNo: int) -> Diagnostic:
        return Diagnostic(
            message=f"'{name}' should be used as a function: {name}(...)",
            severity=SEVERITY_ERROR,
            hint=example,
            line=lineNo,
        )

    return LineRule(f"{name}-call", predicate, build)


def _lineBalanceRule(kind: str, opening: str, closing: str) -> LineRule:
    def predicate(line: str, trimmed: str) -> bool:
        return line.count(opening) != line.count(closing)

    def build(line: str, trimmed: str, lineNo: int) -> Diagnostic:
        return Diagnostic(
            message=f"Mismatched {kind}",
            severity=SEVERITY_ERROR,
            hint=f"Check that all {opening} are closed with {closing}",
            line=lineNo,
        )

    return LineRule(f"balanced-{kind}", predicate, build)


# ---------------------------------------------------------------------------
# Rule table
# ---------------------------------------------------------------------------

PYTHON_LINE_RULES = (
    LineRule("print-statement",         _isPrintStatement,           _printStatement),
    LineRule("block-colon",             _isBlockHeaderMissingColon,  _blockHeaderMissingColon),
    LineRule("else-finally-colon",      _isElseFinallyMissingColon,  _elseFinallyMissingColon),
    LineRule("assignment-in-condition", _isAssignmentInCondition,    _assignmentInCondition),
    _builtinCallRule("len",   LEN_WITHOUT_CALL,   "Use: len(variable) with parentheses, not len variable"),
    _builtinCallRule("range", RANGE_WITHOUT_CALL, "Use: range(10) with parentheses, not range 10"),
) + tuple(_lineBalanceRule(kind, opening, closing) for kind, opening, closing in BRACKET_PAIRS)


def _isSkippable(trimmed: str) -> bool:
    return not trimmed or trimmed.startswith("#")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def checkPython(sourceCode: str) -> list[Diagnostic]:
    """
    Run the Python heuristics over a submission.

    Args:
        sourceCode: Raw Python source string (may be partial).

    Returns:
        Diagnostics in line order, rule order within each line.
    """
    return applyLineRules(PYTHON_LINE_RULES, sourceCode, skipLine=_isSkippable)
