# Expected errors: 3
# A missing colon, an assignment used as a comparison and a Python 2 print.
def grade(score):
    if score = 100
        return "perfect"
    print "keep going"
    return "ok"
