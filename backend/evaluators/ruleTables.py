"""
evaluators/ruleTables.py
-------------------------
Building blocks for the per-language syntax checkers.

Every heuristic is a (predicate, builder) pair. A checker is an ordered list
of such pairs, iterated deterministically, so each rule can be tested on its
own and the emission order is explicit:

  SourceRule - sees the whole submission once (e.g. brace balance)
  LineRule   - sees one line at a time, with its 1-based line number

Also holds the rules shared by the C-family checkers (C and Java): whole-source
bracket balance, assignment inside a condition, and the missing-semicolon
rule factory.
"""

import re
from typing import Callable, NamedTuple, Optional, Sequence

from evaluators.diagnostics import Diagnostic, SEVERITY_ERROR


# ---------------------------------------------------------------------------
# Data structures
# ---------------------------------------------------------------------------

class SourceRule(NamedTuple):
    name:      str
    predicate: Callable[[str], bool]         # (sourceCode) -> fires?
    build:     Callable[[str], Diagnostic]   # (sourceCode) -> diagnostic


class LineRule(NamedTuple):
    name:      str
    predicate: Callable[[str, str], bool]              # (line, trimmed) -> fires?
    build:     Callable[[str, str, int], Diagnostic]   # (line, trimmed, lineNo)


# ---------------------------------------------------------------------------
# Runners
# ---------------------------------------------------------------------------

def applySourceRules(rules: Sequence[SourceRule], sourceCode: str) -> list[Diagnostic]:
    """Run whole-source rules in order, one diagnostic per firing rule."""
    return [rule.build(sourceCode) for rule in rules if rule.predicate(sourceCode)]


def applyLineRules(
    rules:      Sequence[LineRule],
    sourceCode: str,
    skipLine:   Optional[Callable[[str], bool]] = None,
) -> list[Diagnostic]:
    """
    Run line rules over every line of the source.

    Args:
        rules:      Ordered rules; all of them are tried on every line.
        sourceCode: Raw submission text, split on "\\n".
        skipLine:   Optional filter on the trimmed line; True skips the line.

    Returns:
        Diagnostics in line order, then rule order within a line.
    """
    diagnostics = []
    for lineNo, line in enumerate(sourceCode.split("\n"), start=1):
        trimmed = line.strip()
        if skipLine is not None and skipLine(trimmed):
            continue
        for rule in rules:
            if rule.predicate(line, trimmed):
                diagnostics.append(rule.build(line, trimmed, lineNo))
    return diagnostics


# ---------------------------------------------------------------------------
# Shared C-family rules
# ---------------------------------------------------------------------------

# (kind, opening, closing)
BRACKET_PAIRS = (
    ("braces",      "{", "}"),
    ("parentheses", "(", ")"),
    ("brackets",    "[", "]"),
)

CONDITION_ASSIGNMENT_PATTERN = re.compile(r"\b(if|while|for)\s*\([^)]*[^!=<>]\s=\s[^=][^)]*\)")
CONDITION_KEYWORD_PATTERN    = re.compile(r"\b(if|while|for)\b")


def _balanceRule(kind: str, opening: str, closing: str) -> SourceRule:
    def predicate(sourceCode: str) -> bool:
        return sourceCode.count(opening) != sourceCode.count(closing)

    def build(sourceCode: str) -> Diagnostic:
        return Diagnostic(
            message=(
                f"Mismatched {kind}: {sourceCode.count(opening)} opening, "
                f"{sourceCode.count(closing)} closing"
            ),
            severity=SEVERITY_ERROR,
            hint=f"Make sure every {opening} has a corresponding {closing}",
        )

    return SourceRule(f"balanced-{kind}", predicate, build)


BALANCE_RULES = tuple(_balanceRule(kind, opening, closing) for kind, opening, closing in BRACKET_PAIRS)


def _buildConditionAssignment(line: str, trimmed: str, lineNo: int) -> Diagnostic:
    match   = CONDITION_KEYWORD_PATTERN.search(line)
    keyword = match.group(1) if match else "conditional"
    return Diagnostic(
        message=f"Possible assignment (=) instead of comparison (==) in {keyword} condition",
        severity=SEVERITY_ERROR,
        hint="Use == for comparison instead of = for assignment. For example: if (num == 5) not if (num = 5)",
        line=lineNo,
    )


CONDITION_ASSIGNMENT_RULE = LineRule(
    "assignment-in-condition",
    lambda line, trimmed: CONDITION_ASSIGNMENT_PATTERN.search(line) is not None,
    _buildConditionAssignment,
)


def missingSemicolonRule(
    statementPatterns: Sequence[re.Pattern],
    isExempt:          Callable[[str], bool],
    hint:              str,
) -> LineRule:
    """
    Build the missing-semicolon rule for a C-family language.

    A trimmed line needs a semicolon when it matches any of the statement
    patterns and is not exempt (structural tokens, control headers). Lines
    already ending in ';' or ',' pass.
    """
    def predicate(line: str, trimmed: str) -> bool:
        if isExempt(trimmed):
            return False
        if not any(pattern.match(trimmed) for pattern in statementPatterns):
            return False
        return not trimmed.endswith((";", ","))

    def build(line: str, trimmed: str, lineNo: int) -> Diagnostic:
        return Diagnostic(
            message=f'Missing semicolon at end of statement: "{trimmed}"',
            severity=SEVERITY_ERROR,
            hint=hint,
            line=lineNo,
        )

    return LineRule("missing-semicolon", predicate, build)


ASSIGNMENT_STATEMENT_PATTERN = re.compile(r"^[a-zA-Z_]\w*\s*=.*[a-zA-Z0-9_\)\]]\s*$")
CALL_STATEMENT_PATTERN       = re.compile(r"^\w+\s*\([^)]*\)\s*[a-zA-Z0-9_\)]\s*$")
