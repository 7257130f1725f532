import os

__all__ = ['SMALL_PRIMES', 'MR_ROUNDS', 'MIN_KEY_BITS', 'KEY_BITS', 'MESSAGE_BITS', 'from_env']

# Trial divisors checked before Miller-Rabin
SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)

# False positive rate for random inputs is well under 2^-80
MR_ROUNDS = 41

# 5-bit keys leave 2 and 3 as the only factors, a totient of 2 and no exponent to pick
MIN_KEY_BITS = 6

KEY_BITS = 512
MESSAGE_BITS = 256


def from_env(name, default):
    """Integer setting from the environment, e.g. RSATOOLS_KEY_BITS"""
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f'{name} must be an integer, got {value!r}') from None
