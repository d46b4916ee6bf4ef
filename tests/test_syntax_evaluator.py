"""Tests for the evaluator dispatcher and result assembly."""

import pytest

from evaluators.syntaxEvaluator import (
    CONSOLE_LOG_GUIDANCE,
    EMPTY_CODE_GUIDANCE,
    EMPTY_CODE_MESSAGE,
    NO_ERRORS_GUIDANCE,
    SHORT_CODE_GUIDANCE,
    SUCCESS_MESSAGE,
    evaluateCode,
    resolveLanguage,
)


SAMPLE_SUBMISSIONS = [
    ("function add(a, b) { return a + b; }", "javascript"),
    ("function add(a, b { return a + b; }", "javascript"),
    ("function sum(arr)", "js"),
    ("if x > 5\n  print(\"hello\")", "python"),
    ("def factorial(n):\n  return n", "Python"),
    ("int add(int a, int b) { return a + b; }", "c"),
    ("int main() {\n  int x = 5\n  return 0;\n}", "C"),
    ("public static void main(String[] args) { }", "java"),
    ("puts 'hello'", "ruby"),
    ("", "python"),
    ("   \n\t", "java"),
]


class TestEmptyInput:
    """Blank submissions short-circuit before any checker runs."""

    @pytest.mark.parametrize("code", ["", "   ", "\n\n\t  \n"])
    @pytest.mark.parametrize("language", ["javascript", "python", "c", "java", "cobol"])
    def test_empty_code_is_single_error(self, code, language):
        result = evaluateCode(code, language)
        assert result.isValid is False
        assert result.language == "other"
        assert len(result.errors) == 1
        assert result.errors[0].message == EMPTY_CODE_MESSAGE
        assert result.errors[0].severity == "error"
        assert result.guidance == (EMPTY_CODE_GUIDANCE,)
        assert result.warnings == ()
        assert result.successMessage is None

    def test_none_code_treated_as_empty(self):
        result = evaluateCode(None, "python")
        assert result.errors[0].message == EMPTY_CODE_MESSAGE


class TestResolveLanguage:
    """Free-form hints map onto the supported language families."""

    @pytest.mark.parametrize("hint,expected", [
        ("javascript", "javascript"),
        ("JavaScript", "javascript"),
        ("js", "javascript"),
        ("TypeScript", "javascript"),
        ("ts", "javascript"),
        ("python", "python"),
        ("Python3", "python"),
        ("py", "python"),
        ("java", "java"),
        ("JAVA", "java"),
        ("c", "c"),
        ("C", "c"),
        ("c++", "c"),
        ("cpp", "c"),
        ("ruby", "other"),
        ("go", "other"),
        ("", "other"),
        (None, "other"),
    ])
    def test_resolution(self, hint, expected):
        assert resolveLanguage(hint) == expected

    def test_javascript_is_not_java(self):
        """'javascript' contains 'java'; the JS family wins."""
        assert resolveLanguage("javascript") == "javascript"


class TestDispatch:
    """Routing to checkers and the validity verdict."""

    def test_valid_javascript(self):
        result = evaluateCode("function add(a, b) { return a + b; }", "javascript")
        assert result.isValid is True
        assert result.language == "javascript"
        assert result.errors == ()
        assert result.successMessage == SUCCESS_MESSAGE

    def test_unbalanced_javascript(self):
        result = evaluateCode("function add(a, b { return a + b; }", "javascript")
        assert result.isValid is False
        assert len(result.errors) >= 1
        assert result.successMessage is None

    def test_stray_brace_does_not_balance_later_function(self):
        result = evaluateCode("function a() { return 1; }}\nfunction b() { return 2;", "javascript")
        assert result.isValid is False
        assert result.errors[0].line == 1

    def test_modern_javascript_is_valid(self):
        result = evaluateCode("const n = user?.name ?? 'anon';", "javascript")
        assert result.isValid is True

    def test_partial_javascript_is_lenient(self):
        result = evaluateCode("function sum(arr)", "javascript")
        assert result.isValid is True
        assert result.errors == ()

    def test_python_missing_colon(self):
        result = evaluateCode("if x > 5\n  print(\"hello\")", "python")
        assert result.isValid is False
        assert result.language == "python"
        assert any(e.line == 1 and "colon" in e.message for e in result.errors)

    def test_valid_python(self):
        result = evaluateCode("def factorial(n):\n  return n", "python")
        assert result.isValid is True
        assert result.errors == ()

    def test_c_without_main(self):
        result = evaluateCode("int add(int a, int b) { return a + b; }", "c")
        assert result.language == "c"
        assert any("main" in e.message for e in result.errors)

    def test_c_missing_semicolon(self):
        result = evaluateCode("int main() {\n  int x = 5\n  return 0;\n}", "c")
        assert any(e.line == 2 and "semicolon" in e.message for e in result.errors)

    def test_cpp_stream_statement_not_flagged(self):
        """Line-local heuristics do not know C++ streams; this is accepted."""
        code = '#include <iostream>\nint main() {\n  std::cout << "hello"\n  return 0;\n}'
        result = evaluateCode(code, "cpp")
        assert result.language == "c"
        assert result.isValid is True

    @pytest.mark.parametrize("code", [
        'public static void main(String[] args) { System.out.println("hello"); }',
        'System.out.println("hello");',
    ])
    def test_java_without_class(self, code):
        result = evaluateCode(code, "java")
        assert result.language == "java"
        assert any("class definition" in e.message for e in result.errors)

    def test_unknown_language_reported_valid(self):
        result = evaluateCode("puts 'hello'", "ruby")
        assert result.language == "other"
        assert result.isValid is True
        assert result.errors == ()
        assert result.successMessage == SUCCESS_MESSAGE


class TestGuidance:
    """Generic guidance appended after the checker runs."""

    def test_console_log_noted_for_javascript(self):
        result = evaluateCode("console.log('hello world');", "javascript")
        assert result.guidance == (CONSOLE_LOG_GUIDANCE, NO_ERRORS_GUIDANCE)

    def test_console_log_ignored_for_other_languages(self):
        result = evaluateCode("# console.log is not python\nx = 1", "python")
        assert CONSOLE_LOG_GUIDANCE not in result.guidance

    def test_short_code_guidance(self):
        result = evaluateCode("x = 1", "python")
        assert result.guidance == (SHORT_CODE_GUIDANCE, NO_ERRORS_GUIDANCE)

    def test_short_code_uses_trimmed_length(self):
        result = evaluateCode("      x = 1      \n\n\n", "python")
        assert SHORT_CODE_GUIDANCE in result.guidance

    def test_no_success_guidance_when_invalid(self):
        result = evaluateCode("if x > 5\n  print(\"hello\")", "python")
        assert NO_ERRORS_GUIDANCE not in result.guidance

    def test_warnings_always_empty(self):
        assert evaluateCode("int x = 5", "c").warnings == ()


class TestInvariants:
    """Properties that hold for every submission."""

    @pytest.mark.parametrize("code,language", SAMPLE_SUBMISSIONS)
    def test_valid_iff_no_errors(self, code, language):
        result = evaluateCode(code, language)
        assert result.isValid == (len(result.errors) == 0)

    @pytest.mark.parametrize("code,language", SAMPLE_SUBMISSIONS)
    def test_success_message_iff_valid(self, code, language):
        result = evaluateCode(code, language)
        assert (result.successMessage is not None) == result.isValid

    @pytest.mark.parametrize("code,language", SAMPLE_SUBMISSIONS)
    def test_language_is_supported(self, code, language):
        assert evaluateCode(code, language).language in ("javascript", "python", "c", "java", "other")

    @pytest.mark.parametrize("code,language", SAMPLE_SUBMISSIONS)
    def test_idempotent(self, code, language):
        assert evaluateCode(code, language) == evaluateCode(code, language)


class TestSerialisation:
    """EvaluationResult.toDict() JSON shape."""

    def test_invalid_result_shape(self):
        data = evaluateCode("if x > 5\n  print(\"hello\")", "python").toDict()
        assert set(data) == {"isValid", "language", "errors", "warnings", "guidance"}
        assert data["isValid"] is False
        first = data["errors"][0]
        assert first["line"] == 1
        assert first["severity"] == "error"
        assert "hint" in first
        assert "column" not in first

    def test_valid_result_has_success_message(self):
        data = evaluateCode("def factorial(n):\n  return n", "python").toDict()
        assert data["successMessage"] == SUCCESS_MESSAGE
        assert data["errors"] == []

    def test_empty_code_error_has_no_location(self):
        data = evaluateCode("", "python").toDict()
        assert data["errors"] == [{"message": EMPTY_CODE_MESSAGE, "severity": "error"}]
