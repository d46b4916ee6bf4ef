"""Tests for the JavaScript parse check."""

import pytest

from evaluators.javascriptChecker import DEFAULT_JS_HINT, checkJavaScript, generateJSHint


class TestValidCode:
    """Snippets that parse cleanly, including top-level return and current syntax."""

    @pytest.mark.parametrize("code", [
        "function add(a, b) { return a + b; }",
        "const twice = (x) => x * 2;\nconsole.log(twice(4));",
        "let total = 0;\nfor (let i = 0; i < 3; i++) { total += i; }",
        "return 42;",
        "class Point { constructor(x) { this.x = x; } }",
        "const n = user?.name ?? 'anon';",
        "class A { count = 0; }",
        "const big = 10n;",
        "try { f(); } catch { g(); }",
        "const load = async () => { const data = await fetch(url); return data; };",
    ])
    def test_parses(self, code):
        assert checkJavaScript(code) == []

    def test_code_is_never_executed(self):
        """A snippet that would throw at runtime still only gets parsed."""
        assert checkJavaScript("throw new Error('boom');") == []


class TestLeniency:
    """Half-typed snippets are not reported."""

    @pytest.mark.parametrize("code", [
        "function sum(arr)",
        "if (ready) {",
        "const options = {\n  label:",
        "   function sum(arr)   \n",
    ])
    def test_partial_endings(self, code):
        assert checkJavaScript(code) == []

    def test_unexpected_end_of_input(self):
        assert checkJavaScript("function f() { return 1;") == []


class TestSyntaxErrors:
    """Parse failures become a single hinted diagnostic."""

    def test_unclosed_parameter_list(self):
        diagnostics = checkJavaScript("function add(a, b { return a + b; }")
        assert len(diagnostics) == 1
        diagnostic = diagnostics[0]
        assert diagnostic.message.startswith("Unexpected token")
        assert diagnostic.severity == "error"
        assert diagnostic.hint == "Check brackets, parentheses, and quotes balance."
        assert diagnostic.line == 1

    def test_line_is_relative_to_snippet(self):
        diagnostics = checkJavaScript("const a = 1;\nconst b = ;\nconst c = 3;")
        assert len(diagnostics) == 1
        assert diagnostics[0].line == 2

    def test_message_has_no_line_prefix(self):
        diagnostics = checkJavaScript("let x = 1 +;")
        assert not diagnostics[0].message.startswith("Line")

    def test_at_most_one_diagnostic(self):
        assert len(checkJavaScript("let = ;\nvar = ;\nconst = ;")) == 1


class TestHints:
    """Hint lookup by substring of the error detail."""

    @pytest.mark.parametrize("detail,expected", [
        ("Unexpected token {", "Check brackets, parentheses, and quotes balance."),
        ("total is not defined", "Variable may not be declared. Use const/let/var."),
        ("Cannot read properties of undefined", "Trying to access property on undefined/null value."),
        ("Invalid or unexpected token", "Check syntax near the error location."),
        ("Unexpected identifier", DEFAULT_JS_HINT),
    ])
    def test_lookup(self, detail, expected):
        assert generateJSHint(detail) == expected


class TestBraceStructure:
    """Braces are matched within the snippet itself."""

    def test_stray_closing_brace_then_unclosed_function(self):
        code = "function a() { return 1; }}\nfunction b() { return 2;"
        diagnostics = checkJavaScript(code)
        assert len(diagnostics) == 1
        assert diagnostics[0].message == "Unexpected token }"
        assert diagnostics[0].line == 1

    def test_stray_closing_brace_alone(self):
        diagnostics = checkJavaScript("const a = 1;\n}\nconst b = 2;")
        assert len(diagnostics) == 1
        assert diagnostics[0].line == 2
        assert diagnostics[0].column == 1
