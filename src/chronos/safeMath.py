# Fixed-width integer helpers.
#
# Python ints never overflow, so everything here emulates signed 64-bit
# two's-complement words explicitly. Values passed in are assumed to already
# be in signed 64-bit range unless noted otherwise.

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1
MASK64 = 2 ** 64 - 1


def toInt64(x: int) -> int:
    # Reinterpret the low 64 bits of x as a signed word
    x &= MASK64
    return x - 2 ** 64 if x > INT64_MAX else x


def addWrapped(a: int, b: int) -> int:
    return toInt64(a + b)


def subWrapped(a: int, b: int) -> int:
    return toInt64(a - b)


def addSafely(a: int, b: int) -> tuple[int, bool]:
    """Wrapped sum of a and b, plus False if the sum over/underflowed."""
    c = addWrapped(a, b)

    # Different signs can never overflow
    aNeg, bNeg = a < 0, b < 0
    if aNeg != bNeg:
        return c, True

    # Same signs overflowed only if the output sign flipped
    return c, (c < 0) == aNeg


def addWithCarry(a: int, b: int) -> tuple[int, int]:
    """Sum a and b as 64-bit words, returning (sum, carry).

    carry is 0 (no overflow), +1 (carry) or -1 (borrow). When it is nonzero
    the true sum can be recovered from the adjusted word:
      - carry +1: a + b == sum + 2**63
      - carry -1: a + b == sum - 2**63 - 1
    Total over all 64-bit inputs.
    """
    c, ok = addSafely(a, b)
    if ok:
        return c, 0
    if c < 0:
        # Overflow wrapped negative, so carry
        return subWrapped(c, INT64_MIN), +1
    # Underflow wrapped positive, so borrow
    return subWrapped(c, INT64_MAX), -1


def mul128(a: int, b: int) -> tuple[int, int]:
    """Full product of two 64-bit words as (hi, lo) signed halves.

    N.B. A negative product that fits in lo still has hi == -1, from sign
    extension. Use mulFits64() to check whether lo holds the whole answer.
    """
    p = a * b
    return p >> 64, toInt64(p)


def mulFits64(hi: int, lo: int) -> bool:
    # The product fits when hi is nothing but the sign extension of lo
    return hi == (-1 if lo < 0 else 0)


def div128(hi: int, lo: int, divisor: int) -> tuple[int, int]:
    """Divide the 128-bit value (hi, lo) by divisor, returning (quotient, remainder).

    Truncates toward zero, so the remainder takes the sign of the dividend.
    """
    if divisor == 0:
        raise ZeroDivisionError("div128 by zero")
    dividend = (hi << 64) | (lo & MASK64)
    q = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        q = -q
    r = dividend - q * divisor
    if q < INT64_MIN or q > INT64_MAX:
        raise OverflowError(f"div128 quotient {q} exceeds 64 bits")
    return q, r
