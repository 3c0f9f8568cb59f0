class EthCallError(Exception):
    """

    Base class for every error raised while building, sending, or decoding a contract call.  Errors are terminal
    for the current call and are never retried internally.

    """


class AbiError(EthCallError):
    """

    Raised when ABI parsing, encoding, or decoding fails

    """


class MalformedSignature(AbiError):
    """
    Raised when a function signature does not match ``name(type,type,...)``.
    """

    def __init__(self, signature: str, reason: str | None = None):
        self.signature = signature
        self.reason = reason
        message = f"Malformed function signature '{signature}'"
        super().__init__(f"{message}: {reason}" if reason else message)


class UnsupportedType(AbiError):
    """
    Raised when a type string does not belong to a supported ABI type family.  Supported families are:

        * ``uintN`` & ``intN`` for N in 8..256, step 8
        * ``address``
        * ``bool``
        * ``bytesN`` for N in 1..32, and dynamic ``bytes``
        * ``string``

    Arrays and tuples are not supported.
    """

    def __init__(self, type_str: str):
        self.type_str = type_str
        super().__init__(f"Unsupported ABI type: '{type_str}'")


class ArgumentEncodingError(AbiError):
    """Raised when a literal argument cannot be converted to, or packed as, its declared parameter type"""

    def __init__(self, index: int, value: str | None, reason: str):
        self.index = index
        self.value = value
        self.reason = reason
        super().__init__(f"Failed to encode argument {index} ({value!r}): {reason}")


class MalformedReturnType(AbiError):
    """Raised when a token of the return type tuple cannot be parsed"""

    def __init__(self, token: str, return_types: str | None = None):
        self.token = token
        self.return_types = return_types
        super().__init__(f"Malformed return type '{token}'" + (f" in '{return_types}'" if return_types else ""))


class MalformedReturnData(AbiError):
    """Raised when the returned data is not a valid hex string"""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Return data is not valid hex: {raw!r}")


class TruncatedReturnData(AbiError):
    """
    Raised when the returned data is too short for the declared return types.  Covers both head slots, and
    the tail regions referenced by dynamic offsets.
    """

    def __init__(self, actual: int, expected: int | None = None, offset: int | None = None, detail: str | None = None):
        self.actual = actual
        self.expected = expected
        self.offset = offset
        self.detail = detail
        if expected is not None and offset is not None:
            message = (
                f"Return data truncated: reading {expected} bytes at offset {offset} requires {offset + expected} "
                f"bytes, but only {actual} bytes were returned"
            )
        else:
            message = f"Return data truncated: {actual} bytes returned"
        super().__init__(f"{message} ({detail})" if detail else message)


class InvalidReturnValue(AbiError):
    """
    Raised when the returned data is long enough, but holds a value that is invalid for its declared type:

        * integer slots with non-zero (or non sign-extended) high bytes, ie a uint8 slot holding 300
        * bool slots holding anything other than 0 or 1
        * address slots with non-zero high bytes
        * string content that is not valid UTF-8
    """

    def __init__(self, return_types: str, detail: str):
        self.return_types = return_types
        self.detail = detail
        super().__init__(f"Invalid return value decoding {return_types}: {detail}")

class RPCError(EthCallError):
    """

    Raised when the JSON-RPC host returns an error, fails to provide a result, or cannot be reached

    """

    def __init__(self, message: str, payload: dict | None = None):
        self.payload = payload
        super().__init__(message)
