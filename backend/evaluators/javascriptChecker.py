"""
evaluators/javascriptChecker.py
--------------------------------
Syntax check for JavaScript / TypeScript submissions.

The snippet is parsed on its own with the tree-sitter JavaScript grammar,
which covers current ECMAScript (optional chaining, class fields, BigInt,
optional catch binding) and accepts a top-level `return` the way a function
body does. Nothing is ever executed: the first syntax error in the tree is
the only signal used. Two leniency rules keep half-typed code quiet:

  - source ending in ')', '{' or ':' is treated as a header still being typed
  - a token missing at the very end ("Unexpected end of input") is treated
    the same way

At most one diagnostic is produced.
"""

import re

import tree_sitter_language_pack

from evaluators.diagnostics import Diagnostic, SEVERITY_ERROR


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

TS_LANGUAGE = "javascript"

PARTIAL_CODE_ENDINGS = (")", "{", ":")
INCOMPLETE_MARKER    = "Unexpected end"

END_OF_INPUT_MESSAGE = "SyntaxError: Unexpected end of input"
UNEXPECTED_TOKEN     = "SyntaxError: Unexpected token {}"

ERROR_MESSAGE_PATTERN = re.compile(r"(\w+):\s+(.+)")
NEXT_TOKEN_PATTERN    = re.compile(r"[A-Za-z_$][\w$]*|\d+|\S")

# Ordered: first substring match wins
JS_HINTS = (
    ("Unexpected token",            "Check brackets, parentheses, and quotes balance."),
    ("is not defined",              "Variable may not be declared. Use const/let/var."),
    ("Cannot read properties",      "Trying to access property on undefined/null value."),
    ("Invalid or unexpected token", "Check syntax near the error location."),
)
DEFAULT_JS_HINT = "Review the syntax near the error line."


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def generateJSHint(errorMessage: str) -> str:
    """Map a parser error detail to a canned remediation sentence."""
    for key, hint in JS_HINTS:
        if key in errorMessage:
            return hint
    return DEFAULT_JS_HINT


def _firstProblem(node):
    """Leftmost MISSING or ERROR node under `node` (pre-order)."""
    for child in node.children:
        if child.is_missing:
            return child
        if child.has_error:
            return _firstProblem(child)
    return node


def _firstLeaf(node):
    while node.children:
        node = node.children[0]
    return node


def _column(sourceBytes: bytes, node) -> int:
    """1-based character column of a node (tree-sitter counts bytes)."""
    lineStart = node.start_byte - node.start_point[1]
    return len(sourceBytes[lineStart:node.start_byte].decode("utf-8", errors="replace")) + 1


def _describe(sourceBytes: bytes, problem) -> str:
    """Runtime-style error text for the first problem node."""
    if problem.is_missing:
        following = sourceBytes[problem.start_byte:].decode("utf-8", errors="replace")
        token = NEXT_TOKEN_PATTERN.search(following)
        if token is None:
            return END_OF_INPUT_MESSAGE
        return UNEXPECTED_TOKEN.format(token.group(0))

    leaf = _firstLeaf(problem)
    text = sourceBytes[leaf.start_byte:leaf.end_byte].decode("utf-8", errors="replace").strip()
    if not text:
        return END_OF_INPUT_MESSAGE
    return UNEXPECTED_TOKEN.format(text)


def _diagnosticFromMessage(message: str, line: int | None = None, column: int | None = None) -> Diagnostic:
    match = ERROR_MESSAGE_PATTERN.search(message)
    if match is None:
        return Diagnostic(message=message, severity=SEVERITY_ERROR, line=line, column=column)

    detail = match.group(2)
    return Diagnostic(
        message=detail,
        severity=SEVERITY_ERROR,
        line=line,
        column=column,
        hint=generateJSHint(detail),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def checkJavaScript(sourceCode: str) -> list[Diagnostic]:
    """
    Parse a JavaScript snippet and report the first syntax error, if any.

    Args:
        sourceCode: Raw JavaScript source string.

    Returns:
        An empty list, or a list holding exactly one Diagnostic.
    """
    if sourceCode.strip().endswith(PARTIAL_CODE_ENDINGS):
        return []

    parser      = tree_sitter_language_pack.get_parser(TS_LANGUAGE)
    sourceBytes = sourceCode.encode("utf-8")
    tree        = parser.parse(sourceBytes)
    if not tree.root_node.has_error:
        return []

    problem = _firstProblem(tree.root_node)
    message = _describe(sourceBytes, problem)
    if INCOMPLETE_MARKER in message:
        return []

    anchor = problem if problem.is_missing else _firstLeaf(problem)
    return [_diagnosticFromMessage(
        message,
        line=anchor.start_point[0] + 1,
        column=_column(sourceBytes, anchor),
    )]
