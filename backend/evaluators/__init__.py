"""
evaluators/
-----------
Heuristic syntax evaluator for the code-feedback API.

Modules:
    syntaxEvaluator    - Language resolution, checker dispatch, result assembly
    diagnostics        - Diagnostic and EvaluationResult value objects
    ruleTables         - (predicate, builder) rule pairs and shared C-family rules
    javascriptChecker  - tree-sitter parse of the snippet, first error reported
    pythonChecker      - Line-local Python heuristics
    cChecker           - Balance, main() and semicolon heuristics for C
    javaChecker        - Balance, class/main and semicolon heuristics for Java
"""
