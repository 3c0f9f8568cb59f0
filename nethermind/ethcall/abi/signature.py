import logging
import re
from types import MappingProxyType
from typing import Mapping, Sequence

from nethermind.ethcall.exceptions import (
    MalformedReturnType,
    MalformedSignature,
    UnsupportedType,
)
from nethermind.ethcall.types import (
    AddressType,
    BoolType,
    BytesType,
    FunctionSignature,
    IntegerType,
    ReturnSchema,
    StringType,
    TypeDescriptor,
)

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("ethcall").getChild("abi")

SIGNATURE_PATTERN = re.compile(r"^\s*(\w+)\s*\(([^()]*)\)\s*$")

_INTEGER_PATTERN = re.compile(r"^(u?)int([1-9]\d*)$")
_FIXED_BYTES_PATTERN = re.compile(r"^bytes([1-9]\d*)$")

SUPPORTED_TYPES: Mapping[str, TypeDescriptor] = MappingProxyType(
    {
        "address": AddressType(),
        "bool": BoolType(),
        "bytes": BytesType(),
        "string": StringType(),
        "uint": IntegerType(bits=256, signed=False),
        "int": IntegerType(bits=256, signed=True),
    }
)
""" Non-parametrized type families.  ``uintN``, ``intN`` and ``bytesN`` are resolved by pattern """


def parse_type(type_str: str) -> TypeDescriptor:
    """
    Resolves a single type string into a TypeDescriptor.  Whitespace around the token is ignored.

    >>> parse_type(" uint256 ")
    IntegerType(bits=256, signed=False)
    >>> parse_type("bytes4")
    BytesType(size=4)

    :param type_str: ABI type string
    :raises UnsupportedType: if the type is not in the supported type families
    """
    token = type_str.strip()

    if token in SUPPORTED_TYPES:
        return SUPPORTED_TYPES[token]

    if int_match := _INTEGER_PATTERN.match(token):
        bits = int(int_match.group(2))
        if bits > 256 or bits % 8 != 0:
            raise UnsupportedType(token)
        return IntegerType(bits=bits, signed=int_match.group(1) == "")

    if bytes_match := _FIXED_BYTES_PATTERN.match(token):
        size = int(bytes_match.group(1))
        if size > 32:
            raise UnsupportedType(token)
        return BytesType(size=size)

    raise UnsupportedType(token)


def parse_signature(signature: str) -> FunctionSignature:
    """
    Parses a function signature of the form ``name(type,type,...)``.  Nested tuples & arrays are not
    supported, the parameter list is split on commas.

    >>> parse_signature("balanceOf(address)").canonical
    'balanceOf(address)'
    >>> parse_signature("transfer(address, uint)").canonical
    'transfer(address,uint256)'

    :param signature: function signature string
    :raises MalformedSignature: if the signature does not match ``name(type,...)``, or contains an empty parameter
    :raises UnsupportedType: if any parameter has an unsupported type
    """
    match = SIGNATURE_PATTERN.match(signature)
    if match is None:
        raise MalformedSignature(signature, "expected format 'name(type,type,...)'")

    name, param_str = match.group(1), match.group(2)
    if param_str.strip() == "":
        return FunctionSignature(name=name)

    tokens = [token.strip() for token in param_str.split(",")]
    for index, token in enumerate(tokens):
        if token == "":
            raise MalformedSignature(signature, f"parameter {index} is empty")

    return FunctionSignature(name=name, parameters=tuple(parse_type(token) for token in tokens))


def parse_return_types(return_types: str | Sequence[str]) -> ReturnSchema:
    """
    Parses a return type tuple like ``(uint256,address)``.  Only one level of enclosing parentheses is stripped,
    and the parentheses are optional.  An empty string or ``()`` results in an empty schema.

    A list of type strings is also accepted, and each entry is parsed as a single return type.

    :param return_types: return type tuple string, or list of type strings
    :raises MalformedReturnType: if any return type token is empty or unsupported
    """
    if isinstance(return_types, str):
        raw = return_types.strip()
        if raw.startswith("(") and raw.endswith(")"):
            raw = raw[1:-1]
        if raw.strip() == "":
            return ()
        tokens = raw.split(",")
        source = return_types
    else:
        tokens = list(return_types)
        source = None

    schema: list[TypeDescriptor] = []
    for token in tokens:
        if token.strip() == "":
            raise MalformedReturnType(token, source)
        try:
            schema.append(parse_type(token))
        except UnsupportedType as e:
            raise MalformedReturnType(token.strip(), source) from e

    return tuple(schema)
