"""
evaluators/diagnostics.py
--------------------------
Value objects produced by the syntax checkers and the evaluator dispatcher.

  Diagnostic        - one reported problem (message, severity, location, hint)
  EvaluationResult  - the complete verdict for a single submission

Both are frozen: a result is built once per evaluation call and never
mutated afterwards. `toDict()` yields the JSON-compatible shape served by
the API (camelCase keys, unset optional fields omitted).
"""

from dataclasses import dataclass, field
from typing import Optional


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

SEVERITY_ERROR   = "error"
SEVERITY_WARNING = "warning"

LANGUAGE_JAVASCRIPT = "javascript"
LANGUAGE_PYTHON     = "python"
LANGUAGE_C          = "c"
LANGUAGE_JAVA       = "java"
LANGUAGE_OTHER      = "other"

SUPPORTED_LANGUAGES = (
    LANGUAGE_JAVASCRIPT,
    LANGUAGE_PYTHON,
    LANGUAGE_C,
    LANGUAGE_JAVA,
    LANGUAGE_OTHER,
)


# ---------------------------------------------------------------------------
# Data structures
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Diagnostic:
    message:  str                    # Human-readable description
    severity: str = SEVERITY_ERROR   # "error" | "warning"
    line:     Optional[int] = None   # 1-based source line
    column:   Optional[int] = None
    hint:     Optional[str] = None   # Remediation text

    def toDict(self) -> dict:
        data = {"message": self.message, "severity": self.severity}
        if self.line is not None:
            data["line"] = self.line
        if self.column is not None:
            data["column"] = self.column
        if self.hint is not None:
            data["hint"] = self.hint
        return data


@dataclass(frozen=True)
class EvaluationResult:
    isValid:        bool
    language:       str                          # One of SUPPORTED_LANGUAGES
    errors:         tuple[Diagnostic, ...] = field(default_factory=tuple)
    warnings:       tuple[str, ...]        = field(default_factory=tuple)
    guidance:       tuple[str, ...]        = field(default_factory=tuple)
    successMessage: Optional[str] = None

    def toDict(self) -> dict:
        """
        Serialise to the JSON shape:
            {
                "isValid": bool,
                "language": str,
                "errors": [ { "message", "severity", "line"?, "column"?, "hint"? } ],
                "warnings": [ str ],
                "guidance": [ str ],
                "successMessage"?: str
            }
        """
        data = {
            "isValid":  self.isValid,
            "language": self.language,
            "errors":   [error.toDict() for error in self.errors],
            "warnings": list(self.warnings),
            "guidance": list(self.guidance),
        }
        if self.successMessage is not None:
            data["successMessage"] = self.successMessage
        return data
