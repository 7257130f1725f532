class RSAError(Exception):
    pass


class KeyGenerationError(RSAError):
    def __init__(self, message, public_exponent=None, totient=None):
        super().__init__(message)
        self.message = message
        self.public_exponent = public_exponent
        self.totient = totient


class MessageTooLarge(RSAError):
    def __init__(self, message, value=None, modulus=None):
        super().__init__(message)
        self.message = message
        self.value = value
        self.modulus = modulus
