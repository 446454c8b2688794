"""Word-vector arithmetic on unsigned 32-bit words.

A magnitude is a sequence of words, least significant first. The canonical
form has no high-order zero words, so zero is the empty tuple. All functions
here are pure: they accept tuples or lists and return new tuples.

Intermediate values never need more than two words, the same widths a native
implementation would use for carries, borrows and partial products.
"""


WORD_BITS = 32
WORD_BASE = 1 << WORD_BITS
WORD_MASK = WORD_BASE - 1
SIGN_BIT = 1 << (WORD_BITS - 1)

EMPTY = ()


def normalize(a):
    """Strip high-order zero words."""
    n = len(a)
    while n > 0 and a[n - 1] == 0:
        n -= 1
    return tuple(a[:n])


def from_int(i: int):
    """Split a non-negative host integer into words."""
    if i < 0:
        raise ValueError('expected a non-negative integer, got {}'.format(repr(i)))
    out = []
    while i:
        out.append(i & WORD_MASK)
        i >>= WORD_BITS
    return tuple(out)


def to_int(a) -> int:
    """Reassemble words into a host integer."""
    i = 0
    for w in reversed(a):
        i = (i << WORD_BITS) | w
    return i


def bit_length(a) -> int:
    if not a:
        return 0
    return (len(a) - 1) * WORD_BITS + a[-1].bit_length()


def compare(a, b) -> int:
    """Compare two canonical magnitudes, returning -1, 0 or 1."""
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1
    return 0


# addition and subtraction

def add(a, b):
    if len(a) < len(b):
        a, b = b, a
    blen = len(b)
    out = []
    carry = 0
    for i, ai in enumerate(a):
        if i < blen:
            s = ai + b[i] + carry
        else:
            s = ai + carry
        out.append(s & WORD_MASK)
        carry = s >> WORD_BITS
    if carry:
        out.append(carry)
    return tuple(out)


def add_small(a, w: int):
    """Add a single word to a magnitude."""
    out = list(a)
    carry = w
    i = 0
    while carry:
        if i == len(out):
            out.append(carry)
            break
        s = out[i] + carry
        out[i] = s & WORD_MASK
        carry = s >> WORD_BITS
        i += 1
    return normalize(out)


def sub(a, b):
    """a - b, where a >= b."""
    blen = len(b)
    out = []
    borrow = 0
    for i, ai in enumerate(a):
        d = ai - borrow
        if i < blen:
            d -= b[i]
        if d < 0:
            d += WORD_BASE
            borrow = 1
        else:
            borrow = 0
        out.append(d)
    if borrow:
        raise ValueError('word subtraction underflow: minuend smaller than subtrahend')
    return normalize(out)


# multiplication

def mul_small(a, w: int):
    """Multiply a magnitude by a single word."""
    if w == 0 or not a:
        return EMPTY
    out = []
    carry = 0
    for ai in a:
        p = ai * w + carry
        out.append(p & WORD_MASK)
        carry = p >> WORD_BITS
    if carry:
        out.append(carry)
    return tuple(out)


def mul(a, b):
    """Schoolbook multiplication."""
    if not a or not b:
        return EMPTY
    blen = len(b)
    out = [0] * (len(a) + blen)
    for i, ai in enumerate(a):
        if ai == 0:
            continue
        carry = 0
        for j, bj in enumerate(b):
            p = ai * bj + out[i + j] + carry
            out[i + j] = p & WORD_MASK
            carry = p >> WORD_BITS
        # nothing has been written above i + blen - 1 yet
        out[i + blen] = carry
    return normalize(out)


# division

def divmod_small(a, w: int):
    """Divide a magnitude by a single nonzero word.
    Returns (quotient words, remainder as a host integer).
    """
    if w == 0:
        raise ZeroDivisionError('word division by zero')
    q = [0] * len(a)
    rem = 0
    for i in range(len(a) - 1, -1, -1):
        cur = (rem << WORD_BITS) | a[i]
        q[i] = cur // w
        rem = cur % w
    return normalize(q), rem


def divmod_words(a, b):
    """Long division of magnitudes (Knuth, TAOCP vol. 2, algorithm D).
    Returns (quotient, remainder), both canonical.
    """
    if not b:
        raise ZeroDivisionError('word division by zero')
    if compare(a, b) < 0:
        return EMPTY, normalize(a)
    if len(b) == 1:
        q, r = divmod_small(a, b[0])
        return q, (from_int(r) if r else EMPTY)

    n = len(b)
    m = len(a) - n

    # normalize so that the top bit of the divisor is set
    s = WORD_BITS - b[-1].bit_length()
    vn = list(_shift_words_left(b, s, n))
    un = list(_shift_words_left(a, s, len(a) + 1))

    vtop = vn[n - 1]
    vnext = vn[n - 2]
    q = [0] * (m + 1)

    for j in range(m, -1, -1):
        num = (un[j + n] << WORD_BITS) | un[j + n - 1]
        qhat = num // vtop
        rhat = num % vtop
        while qhat >= WORD_BASE or qhat * vnext > ((rhat << WORD_BITS) | un[j + n - 2]):
            qhat -= 1
            rhat += vtop
            if rhat >= WORD_BASE:
                break

        # multiply and subtract
        borrow = 0
        carry = 0
        for i in range(n):
            p = qhat * vn[i] + carry
            carry = p >> WORD_BITS
            t = un[i + j] - (p & WORD_MASK) - borrow
            if t < 0:
                un[i + j] = t + WORD_BASE
                borrow = 1
            else:
                un[i + j] = t
                borrow = 0
        t = un[j + n] - carry - borrow

        if t < 0:
            # qhat was one too large: add the divisor back
            un[j + n] = t + WORD_BASE
            qhat -= 1
            carry = 0
            for i in range(n):
                s2 = un[i + j] + vn[i] + carry
                un[i + j] = s2 & WORD_MASK
                carry = s2 >> WORD_BITS
            un[j + n] = (un[j + n] + carry) & WORD_MASK
        else:
            un[j + n] = t

        q[j] = qhat

    r = shift_right(normalize(un[:n]), s)
    return normalize(q), r


# shifts

def _shift_words_left(a, s: int, size: int):
    """Shift left by s < WORD_BITS bits into a zero-padded list of the given size."""
    out = [0] * size
    if s == 0:
        out[:len(a)] = a
        return out
    carry = 0
    inv = WORD_BITS - s
    for i, ai in enumerate(a):
        out[i] = ((ai << s) & WORD_MASK) | carry
        carry = ai >> inv
    if carry:
        out[len(a)] = carry
    return out


def shift_left(a, k: int):
    """Shift a magnitude left by k >= 0 bits."""
    if not a or k == 0:
        return tuple(a)
    whole, s = divmod(k, WORD_BITS)
    return normalize([0] * whole + _shift_words_left(a, s, len(a) + 1))


def shift_right(a, k: int):
    """Shift a magnitude right by k >= 0 bits, discarding the low bits."""
    if not a or k == 0:
        return tuple(a)
    whole, s = divmod(k, WORD_BITS)
    if whole >= len(a):
        return EMPTY
    src = a[whole:]
    if s == 0:
        return tuple(src)
    inv = WORD_BITS - s
    out = []
    for i, w in enumerate(src):
        v = w >> s
        if i + 1 < len(src):
            v |= (src[i + 1] << inv) & WORD_MASK
        out.append(v)
    return normalize(out)


def has_low_bits(a, k: int) -> bool:
    """Are any of the low k bits of the magnitude set?"""
    whole, s = divmod(k, WORD_BITS)
    for i in range(min(whole, len(a))):
        if a[i]:
            return True
    if s and whole < len(a):
        return (a[whole] & ((1 << s) - 1)) != 0
    return False


# two's complement views, for bitwise operations

def to_twos(sign: int, a, size: int):
    """Infinite two's complement of a signed magnitude, truncated to size words.
    size must be larger than len(a), so the top word carries the sign.
    """
    out = list(a) + [0] * (size - len(a))
    if sign >= 0:
        return out
    # negate: invert every word and add one
    carry = 1
    for i in range(size):
        s = (out[i] ^ WORD_MASK) + carry
        out[i] = s & WORD_MASK
        carry = s >> WORD_BITS
    return out


def from_twos(t):
    """Signed magnitude (sign, words) from a two's complement word list."""
    if not t or not (t[-1] & SIGN_BIT):
        a = normalize(t)
        return (1 if a else 0), a
    out = list(t)
    carry = 1
    for i in range(len(out)):
        s = (out[i] ^ WORD_MASK) + carry
        out[i] = s & WORD_MASK
        carry = s >> WORD_BITS
    if carry:
        out.append(carry)
    return -1, normalize(out)
