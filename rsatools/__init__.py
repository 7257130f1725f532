"""
Textbook RSA key generation and encryption built on Miller-Rabin and a binary extended Euclid.
"""

from rsatools import RSA, error, number_theory_stuff, params
from rsatools.RSA import *
from rsatools.error import RSAError, KeyGenerationError, MessageTooLarge
from rsatools.number_theory_stuff import *

__all__ = ['RSAError', 'KeyGenerationError', 'MessageTooLarge']

for _module in (RSA, number_theory_stuff):
    __all__.extend(getattr(_module, '__all__', []))

__version__ = "0.1"
