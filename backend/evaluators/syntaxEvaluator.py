"""
evaluators/syntaxEvaluator.py
------------------------------
Entry point of the heuristic syntax evaluator.

  1. Short-circuits empty submissions
  2. Resolves a free-form language hint ("JS", "python3", "c++", ...) to one
     of the supported languages
  3. Runs the matching checker on the untouched source
  4. Assembles errors, guidance and the success message into an
     EvaluationResult

Pure function of its inputs: no I/O, no shared state, never raises.
Unrecognised languages run no checker and are reported valid.
"""

from evaluators.cChecker import checkC
from evaluators.diagnostics import (
    Diagnostic,
    EvaluationResult,
    LANGUAGE_C,
    LANGUAGE_JAVA,
    LANGUAGE_JAVASCRIPT,
    LANGUAGE_OTHER,
    LANGUAGE_PYTHON,
    SEVERITY_ERROR,
)
from evaluators.javaChecker import checkJava
from evaluators.javascriptChecker import checkJavaScript
from evaluators.pythonChecker import checkPython


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

EMPTY_CODE_MESSAGE   = "Code cannot be empty"
EMPTY_CODE_GUIDANCE  = "Write some code to get started!"
CONSOLE_LOG_GUIDANCE = "✓ Found console.log for debugging."
SHORT_CODE_GUIDANCE  = "💡 Try adding more logic to make this code meaningful."
NO_ERRORS_GUIDANCE   = "✓ No syntax errors detected! Good job."
SUCCESS_MESSAGE      = "✅ Your code is correct!"

MIN_MEANINGFUL_LENGTH = 10

CHECKERS = {
    LANGUAGE_JAVASCRIPT: checkJavaScript,
    LANGUAGE_PYTHON:     checkPython,
    LANGUAGE_C:          checkC,
    LANGUAGE_JAVA:       checkJava,
}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def resolveLanguage(languageHint: str | None) -> str:
    """
    Classify a free-form language hint by substring containment.

    Priority order matters: "javascript" contains "java", and "typescript"
    contains "c", so the JavaScript family is tested first and Java requires
    the absence of "script".
    """
    normalized = (languageHint or "").lower()

    if any(marker in normalized for marker in ("js", "javascript", "ts", "typescript")):
        return LANGUAGE_JAVASCRIPT
    if "python" in normalized or "py" in normalized:
        return LANGUAGE_PYTHON
    if "java" in normalized and "script" not in normalized:
        return LANGUAGE_JAVA
    if "c" in normalized:
        return LANGUAGE_C
    return LANGUAGE_OTHER


def _buildGuidance(sourceCode: str, language: str, errors: list[Diagnostic]) -> list[str]:
    guidance = []
    if language == LANGUAGE_JAVASCRIPT and "console.log" in sourceCode:
        guidance.append(CONSOLE_LOG_GUIDANCE)
    if len(sourceCode.strip()) < MIN_MEANINGFUL_LENGTH:
        guidance.append(SHORT_CODE_GUIDANCE)
    if not errors:
        guidance.append(NO_ERRORS_GUIDANCE)
    return guidance


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def evaluateCode(sourceCode: str | None, languageHint: str | None) -> EvaluationResult:
    """
    Evaluate a code submission.

    Args:
        sourceCode:   The raw snippet; may be empty or partial.
        languageHint: Free-form, case-insensitive language name.

    Returns:
        EvaluationResult with isValid == (no errors) and successMessage set
        only when valid.
    """
    sourceCode = sourceCode or ""

    if not sourceCode.strip():
        return EvaluationResult(
            isValid=False,
            language=LANGUAGE_OTHER,
            errors=(Diagnostic(message=EMPTY_CODE_MESSAGE, severity=SEVERITY_ERROR),),
            guidance=(EMPTY_CODE_GUIDANCE,),
        )

    language = resolveLanguage(languageHint)
    checker  = CHECKERS.get(language)
    errors   = checker(sourceCode) if checker else []

    isValid = not errors
    return EvaluationResult(
        isValid=isValid,
        language=language,
        errors=tuple(errors),
        warnings=(),
        guidance=tuple(_buildGuidance(sourceCode, language, errors)),
        successMessage=SUCCESS_MESSAGE if isValid else None,
    )
