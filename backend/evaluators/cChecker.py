"""
evaluators/cChecker.py
-----------------------
Heuristic syntax checks for C (and, loosely, C++) submissions.

Whole-source checks (reported without a line number):
  1. Brace / parenthesis / bracket counts balance
  2. A `main` entry point exists
  3. `int main() { ... }` contains a return statement

Per-line checks:
  4. Assignment (=) inside an if/while/for condition
  5. Missing semicolon after declarations, assignments and calls

All checks are line-local regex matches; multi-line statements, string
literals containing braces and macros can produce false positives.
"""

import re

from evaluators.diagnostics import Diagnostic, SEVERITY_ERROR
from evaluators.ruleTables import (
    ASSIGNMENT_STATEMENT_PATTERN,
    BALANCE_RULES,
    CALL_STATEMENT_PATTERN,
    CONDITION_ASSIGNMENT_RULE,
    SourceRule,
    applyLineRules,
    applySourceRules,
    missingSemicolonRule,
)


# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

MAIN_BODY_PATTERN = re.compile(r"int\s+main\s*\(\s*\)\s*\{([^}]*)", re.DOTALL)

STATEMENT_PATTERNS = (
    re.compile(r"^(int|char|float|double|void|long|short|unsigned)\s+.*[a-zA-Z0-9_\)\]]\s*$"),
    ASSIGNMENT_STATEMENT_PATTERN,
    CALL_STATEMENT_PATTERN,
    re.compile(r"^(printf|scanf|return)\s*\(.*\)\s*$"),
)

COMMENT_PREFIXES    = ("//", "*", "#")
STRUCTURAL_LINES    = ("{", "}", "},")
CONTROL_PREFIXES    = ("if", "else", "for", "while")


# ---------------------------------------------------------------------------
# Whole-source rules
# ---------------------------------------------------------------------------

def _isMissingMain(sourceCode: str) -> bool:
    return "main" not in sourceCode


def _missingMain(sourceCode: str) -> Diagnostic:
    return Diagnostic(
        message="Missing main() function - every C program needs a main function",
        severity=SEVERITY_ERROR,
        hint="Add: int main() { ... return 0; }",
    )


def _isMainWithoutReturn(sourceCode: str) -> bool:
    match = MAIN_BODY_PATTERN.search(sourceCode)
    return match is not None and "return" not in match.group(1)


def _mainWithoutReturn(sourceCode: str) -> Diagnostic:
    return Diagnostic(
        message="main() function should have a return statement",
        severity=SEVERITY_ERROR,
        hint="Add: return 0; at the end of main()",
    )


C_SOURCE_RULES = BALANCE_RULES + (
    SourceRule("main-present", _isMissingMain,       _missingMain),
    SourceRule("main-returns", _isMainWithoutReturn, _mainWithoutReturn),
)


# ---------------------------------------------------------------------------
# Per-line rules
# ---------------------------------------------------------------------------

def _isExemptFromSemicolon(trimmed: str) -> bool:
    return (
        trimmed in STRUCTURAL_LINES
        or trimmed.startswith(CONTROL_PREFIXES)
        or trimmed.endswith("{")
    )


def _isCommentOrDirective(trimmed: str) -> bool:
    return not trimmed or trimmed.startswith(COMMENT_PREFIXES)


C_SEMICOLON_RULE = missingSemicolonRule(
    STATEMENT_PATTERNS,
    _isExemptFromSemicolon,
    "Add a semicolon (;) at the end of variable declarations, assignments, and function calls",
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def checkC(sourceCode: str) -> list[Diagnostic]:
    """
    Run the C heuristics over a submission.

    Returns whole-source diagnostics first, then condition-assignment
    diagnostics for every line, then missing-semicolon diagnostics.
    """
    diagnostics = applySourceRules(C_SOURCE_RULES, sourceCode)
    diagnostics.extend(applyLineRules((CONDITION_ASSIGNMENT_RULE,), sourceCode))
    diagnostics.extend(applyLineRules((C_SEMICOLON_RULE,), sourceCode, skipLine=_isCommentOrDirective))
    return diagnostics
