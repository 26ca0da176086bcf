from corekit.fibonacci import FibonacciSequence


def test_values():
    fib = FibonacciSequence()
    seen = [fib.a]
    for _ in range(6):
        fib.next()
        seen.append(fib.a)
    assert seen == [1, 1, 2, 3, 5, 8, 13]


def test_b_leads_a():
    fib = FibonacciSequence()
    assert fib.b == 1
    fib.next()
    fib.next()
    assert (fib.a, fib.b) == (2, 3)


def test_reset():
    fib = FibonacciSequence()
    for _ in range(5):
        fib.next()
    fib.reset()
    assert (fib.a, fib.b) == (1, 1)