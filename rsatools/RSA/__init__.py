import logging
from math import gcd
from typing import Tuple, Union

from rsatools.error import KeyGenerationError, MessageTooLarge
from rsatools.number_theory_stuff import random_prime, mod_inverse
from rsatools.params import KEY_BITS, MIN_KEY_BITS

__all__ = ['RSAKey', 'Message', 'generate_key', 'generate_keypair', 'encrypt', 'decrypt']

log = logging.getLogger(__name__)

KeyTuple = Tuple[int, int]  # (exponent, modulus)


class RSAKey:
    """An RSA modulus together with its public and private exponents"""

    __slots__ = ('_modulus', '_public_exponent', '_private_exponent')

    def __init__(self, modulus: int, public_exponent: int, private_exponent: int):
        self._modulus = modulus
        self._public_exponent = public_exponent
        self._private_exponent = private_exponent

    @property
    def modulus(self) -> int:
        return self._modulus

    @property
    def public_exponent(self) -> int:
        return self._public_exponent

    @property
    def private_exponent(self) -> int:
        return self._private_exponent

    @property
    def public(self) -> KeyTuple:
        return self._public_exponent, self._modulus

    @property
    def private(self) -> KeyTuple:
        return self._private_exponent, self._modulus

    def __eq__(self, other):
        if not isinstance(other, RSAKey):
            return NotImplemented
        return (self.modulus, self.public_exponent, self.private_exponent) == \
               (other.modulus, other.public_exponent, other.private_exponent)

    def __hash__(self):
        return hash((self.modulus, self.public_exponent, self.private_exponent))

    def __repr__(self):
        return f"{self.__class__.__name__}(modulus={self.modulus}, " \
               f"public_exponent={self.public_exponent}, private_exponent={self.private_exponent})"


def generate_key(num_bits: int = KEY_BITS, rng=None) -> RSAKey:
    """
    Generate an RSA key whose modulus is the product of two distinct num_bits/2-bit primes.

    The public exponent is itself a random num_bits/2-bit prime, redrawn until it
    is smaller than and coprime to the totient.
    """
    if num_bits < MIN_KEY_BITS:
        raise ValueError(f'Key size must be at least {MIN_KEY_BITS} bits, got {num_bits}')

    half = num_bits // 2

    prime1 = random_prime(half, rng)
    prime2 = random_prime(half, rng)
    while prime1 == prime2:
        log.debug('Drew the same %d-bit prime twice, retrying', half)
        prime2 = random_prime(half, rng)

    modulus = prime1 * prime2
    totient = (prime1 - 1) * (prime2 - 1)

    public_exponent = random_prime(half, rng)
    while public_exponent >= totient or gcd(public_exponent, totient) != 1:
        log.debug('Rejected public exponent candidate %d', public_exponent)
        public_exponent = random_prime(half, rng)

    private_exponent = mod_inverse(public_exponent, totient)
    if private_exponent is None:
        raise KeyGenerationError('Public exponent has no inverse modulo the totient',
                                 public_exponent=public_exponent, totient=totient)

    log.debug('Generated %d-bit modulus', modulus.bit_length())
    return RSAKey(modulus, public_exponent, private_exponent)


def generate_keypair(bits: int = KEY_BITS, rng=None) -> Tuple[KeyTuple, KeyTuple]:
    key = generate_key(bits, rng)
    return key.private, key.public


def _apply(value: int, key: KeyTuple) -> int:
    exponent, modulus = key
    if not 0 <= value < modulus:
        raise MessageTooLarge('Message must be smaller than the modulus', value=value, modulus=modulus)
    return pow(value, exponent, modulus)


def encrypt(key: Union[RSAKey, KeyTuple], message: int) -> int:
    if isinstance(key, RSAKey):
        key = key.public
    return _apply(message, key)


def decrypt(key: Union[RSAKey, KeyTuple], ciphertext: int) -> int:
    if isinstance(key, RSAKey):
        key = key.private
    return _apply(ciphertext, key)


def _modulus(key: Union[RSAKey, KeyTuple]) -> int:
    return key.modulus if isinstance(key, RSAKey) else key[1]


def _to_bytes(i: int, length: int = None) -> bytes:
    if length is None or i.bit_length() > 8 * length:
        length = max(1, (i.bit_length() + 7) // 8)
    return i.to_bytes(length, 'big')


class Message:
    """
    Bytes that an RSA key encrypts and decrypts in place.

    Ciphertext is padded to the byte length of the modulus. The plaintext length
    is kept across encryption so that leading zero bytes survive the round trip.
    """

    def __init__(self, bts: bytes, length: int = None):
        self.msg = bts
        self.length = length

    @classmethod
    def from_int(cls, i: int) -> 'Message':
        return cls(_to_bytes(i))

    @classmethod
    def from_hex(cls, h: str) -> 'Message':
        return cls(bytes.fromhex(h))

    @classmethod
    def from_str(cls, s: str, encoding='utf-8') -> 'Message':
        return cls(s.encode(encoding))

    def int(self):
        return int.from_bytes(self.msg, 'big')

    def hex(self):
        return self.msg.hex()

    def str(self, encoding='utf-8'):
        return self.msg.decode(encoding)

    def bytes(self):
        return self.msg

    def encrypt(self, key: Union[RSAKey, KeyTuple]):
        ciphertext = encrypt(key, self.int())
        self.length = len(self.msg)
        self.msg = _to_bytes(ciphertext, (_modulus(key).bit_length() + 7) // 8)

    def decrypt(self, key: Union[RSAKey, KeyTuple]):
        plaintext = decrypt(key, self.int())
        self.msg = _to_bytes(plaintext, self.length)
        self.length = None

    def __eq__(self, other):
        if not isinstance(other, Message):
            return NotImplemented
        return self.msg == other.msg

    def __repr__(self):
        return f"{self.__class__.__name__}({self.msg!r})"
