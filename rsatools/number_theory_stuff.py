import secrets
from typing import Optional

from rsatools.params import SMALL_PRIMES, MR_ROUNDS

__all__ = ['is_prime', 'miller_rabin', 'random_prime', 'mod_inverse']

# Any object with the random.Random interface can stand in for this one
_system_random = secrets.SystemRandom()


def _decompose(n):
    """Write n - 1 as d * 2**s with d odd and return (d, s)"""
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    return d, s


def is_prime(n: int, rng=None, rounds: int = MR_ROUNDS) -> bool:
    """
        Probabilistic primality test.

        Small inputs are settled by trial division against SMALL_PRIMES,
        everything else goes through `rounds` rounds of Miller-Rabin with a
        fresh random witness in [2, n) per round.

        rng is anything exposing randrange(a, b), e.g. random.Random(seed)
        for reproducible runs. Defaults to the operating system's CSPRNG.
    """
    if n < 2:
        return False

    # Must come before trial division or the small primes divide themselves
    if n in SMALL_PRIMES:
        return True

    for p in SMALL_PRIMES:
        if n % p == 0:
            return False

    if rng is None:
        rng = _system_random
    d, s = _decompose(n)

    for _ in range(rounds):
        a = rng.randrange(2, n)
        x = pow(a, d, n)
        if x == 1:
            continue
        for _ in range(s):
            if x == n - 1:
                break
            x = pow(x, 2, n)
        else:
            return False
    return True


miller_rabin = is_prime


def random_prime(num_bits: int, rng=None) -> int:
    """Random probable prime with exactly num_bits significant bits"""
    if num_bits < 2:
        raise ValueError(f'Cannot generate a {num_bits}-bit prime')

    if rng is None:
        rng = _system_random
    top_bit = 1 << (num_bits - 1)
    while True:
        # Even candidates are left to the trial division in is_prime
        candidate = rng.getrandbits(num_bits) | top_bit
        if is_prime(candidate, rng):
            return candidate


def mod_inverse(a: int, m: int) -> Optional[int]:
    """
        Find x in [0, m) such that a * x = 1 (mod m), or None when gcd(a, m) != 1.

        Binary flavour of the extended Euclidean algorithm: instead of dividing,
        the smaller remainder is shifted up to the bit length of the larger one
        and subtracted (or added when the signs differ), so every step strips at
        least one bit off u. Each remainder carries its coefficient modulo m:

            u = r * a (mod m)
            v = s * a (mod m)

        When v is down to a single bit it is either 0 (a and m share a factor)
        or +-1, in which case +-s is the inverse.
    """
    if m < 1:
        raise ValueError('Modulus must be positive')
    if a < 0:
        raise ValueError('Cannot invert a negative number')

    if a < m:
        state = (m, 0), (a, 1)
    else:
        state = (a, 1), (m, 0)

    while state[1][0].bit_length() > 1:
        (u, r), (v, s) = state
        f = u.bit_length() - v.bit_length()
        if (u < 0) == (v < 0):
            u, r = u - (v << f), r - (s << f)
        else:
            u, r = u + (v << f), r + (s << f)

        if u.bit_length() < v.bit_length():
            state = (v, s), (u, r)
        else:
            state = (u, r), (v, s)

    v, s = state[1]
    if v == 0:
        return None

    if v < 0:
        s = -s

    return s % m
