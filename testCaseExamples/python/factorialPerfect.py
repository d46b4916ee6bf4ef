# Expected errors: 0
# Iterative factorial. Every block header ends with a colon.
def factorial(n):
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result
