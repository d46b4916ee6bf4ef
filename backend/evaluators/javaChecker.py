"""
evaluators/javaChecker.py
--------------------------
Heuristic syntax checks for Java submissions. Same shape as the C checker
with Java vocabulary:

  1. Brace / parenthesis / bracket balance over the whole source
  2. A class definition is present
  3. A main method is present (independent of check 2)
  4. Assignment (=) inside an if/while/for condition, per line
  5. Missing semicolon after declarations, assignments, calls and
     System.out.print/println, per line
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

STATEMENT_PATTERNS = (
    re.compile(
        r"^(public|private|protected|static)?\s*"
        r"(int|String|double|boolean|void|long|char|float)\s+.*[a-zA-Z0-9_\)\]]\s*$"
    ),
    ASSIGNMENT_STATEMENT_PATTERN,
    CALL_STATEMENT_PATTERN,
    re.compile(r"^(System\.out\.println|System\.out\.print|return)\s*\(.*\)\s*$"),
)

# Comments, annotations and compilation-unit headers
NON_STATEMENT_PREFIXES = ("//", "*", "@", "import", "package")
STRUCTURAL_LINES       = ("{", "}")
CONTROL_PREFIXES       = ("if", "else", "for", "while")


# ---------------------------------------------------------------------------
# Whole-source rules
# ---------------------------------------------------------------------------

def _missingClass(sourceCode: str) -> Diagnostic:
    return Diagnostic(
        message="Missing class definition - Java programs need at least one public class",
        severity=SEVERITY_ERROR,
        hint="Add: public class ClassName { ... }",
    )


def _missingMain(sourceCode: str) -> Diagnostic:
    return Diagnostic(
        message="Missing main() method - must have: public static void main(String[] args)",
        severity=SEVERITY_ERROR,
        hint="Add the main method as entry point",
    )


JAVA_SOURCE_RULES = BALANCE_RULES + (
    SourceRule("class-present", lambda sourceCode: "class " not in sourceCode, _missingClass),
    SourceRule("main-present",  lambda sourceCode: "main" not in sourceCode,   _missingMain),
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


def _isNonStatement(trimmed: str) -> bool:
    return not trimmed or trimmed.startswith(NON_STATEMENT_PREFIXES)


JAVA_SEMICOLON_RULE = missingSemicolonRule(
    STATEMENT_PATTERNS,
    _isExemptFromSemicolon,
    "Add a semicolon (;) at the end of variable declarations, assignments, and method calls",
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def checkJava(sourceCode: str) -> list[Diagnostic]:
    """Run the Java heuristics; ordering matches checkC()."""
    diagnostics = applySourceRules(JAVA_SOURCE_RULES, sourceCode)
    diagnostics.extend(applyLineRules((CONDITION_ASSIGNMENT_RULE,), sourceCode))
    diagnostics.extend(applyLineRules((JAVA_SEMICOLON_RULE,), sourceCode, skipLine=_isNonStatement))
    return diagnostics
