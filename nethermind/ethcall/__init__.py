from .abi import (
    decode_return_data,
    decode_return_hex,
    encode_call,
    format_return_values,
    function_selector,
    parse_return_types,
    parse_signature,
)
from .exceptions import (
    ArgumentEncodingError,
    EthCallError,
    InvalidReturnValue,
    MalformedReturnData,
    MalformedReturnType,
    MalformedSignature,
    RPCError,
    TruncatedReturnData,
    UnsupportedType,
)

__all__ = [
    "ArgumentEncodingError",
    "EthCallError",
    "InvalidReturnValue",
    "MalformedReturnData",
    "MalformedReturnType",
    "MalformedSignature",
    "RPCError",
    "TruncatedReturnData",
    "UnsupportedType",
    "decode_return_data",
    "decode_return_hex",
    "encode_call",
    "format_return_values",
    "function_selector",
    "parse_return_types",
    "parse_signature",
]
