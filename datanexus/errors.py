class DataNexusError(ValueError):
    """Base class for inputs the encoder refuses to build an instruction from."""


class InvalidLengthError(DataNexusError):
    def __init__(self, what: str, expected: int, actual: int):
        super().__init__(f"{what} must be exactly {expected} bytes, got {actual}")
        self.what = what
        self.expected = expected
        self.actual = actual


class AmountOverflowError(DataNexusError):
    def __init__(self, value: int, bits: int = 64):
        super().__init__(f"{value} does not fit in an unsigned {bits}-bit integer")
        self.value = value
        self.bits = bits


class ShareLimitOverflowError(AmountOverflowError):
    def __init__(self, value: int):
        super().__init__(value, bits=16)


class MissingAccountError(DataNexusError):
    def __init__(self, operation: str, roles):
        names = ", ".join(roles)
        super().__init__(f"{operation} requires accounts: {names}")
        self.operation = operation
        self.roles = tuple(roles)


class UnknownAccountError(DataNexusError):
    def __init__(self, operation: str, roles):
        names = ", ".join(roles)
        super().__init__(f"{operation} does not take accounts: {names}")
        self.operation = operation
        self.roles = tuple(roles)


class ConfigurationError(RuntimeError):
    pass
