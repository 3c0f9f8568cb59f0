import logging
import re
from typing import Any, Callable, Sequence

from eth_abi import encode as eth_abi_encode
from eth_abi import is_encodable
from eth_abi.exceptions import EncodingError
from eth_utils import decode_hex, is_hex_address, to_checksum_address

from nethermind.ethcall.exceptions import ArgumentEncodingError, UnsupportedType
from nethermind.ethcall.types import (
    AddressType,
    BoolType,
    BytesType,
    EncodedCall,
    FunctionSignature,
    IntegerType,
    StringType,
    TypeDescriptor,
)

from .selector import function_selector
from .signature import parse_signature
from .utils import add_0x_prefix

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("ethcall").getChild("abi")

TraceHook = Callable[[str, dict[str, Any]], None]
""" Optional callback receiving (event name, event details) during encoding """

# pylint: disable=raise-missing-from

_DECIMAL_PATTERN = re.compile(r"^[+-]?[0-9]+$")
_HEX_BYTES_PATTERN = re.compile(r"^0x(?:[0-9a-fA-F]{2})*$")


def convert_argument(index: int, type_descriptor: TypeDescriptor, literal: str) -> Any:
    """
    Converts a literal string argument into the python value used for encoding.

    * Integers are parsed as base 10.  Bit width is checked when packing
    * Addresses & bytes tolerate a missing 0x prefix
    * Booleans accept ``true`` or ``false`` in any case
    * Strings are used verbatim

    :param index: position of the argument in the parameter list
    :param type_descriptor: declared parameter type
    :param literal: raw argument string
    :return: int, checksummed address, bool, bytes, or str
    :raises ArgumentEncodingError: if the literal is invalid for the type
    """
    match type_descriptor:
        case IntegerType():
            token = literal.strip()
            if not _DECIMAL_PATTERN.match(token):
                raise ArgumentEncodingError(index, literal, f"not a base-10 integer for {type_descriptor.canonical}")
            return int(token, 10)

        case AddressType():
            token = add_0x_prefix(literal.strip())
            if not is_hex_address(token):
                raise ArgumentEncodingError(index, literal, "address must be 20 bytes of hex")
            return to_checksum_address(token)

        case BoolType():
            match literal.strip().lower():
                case "true":
                    return True
                case "false":
                    return False
                case _:
                    raise ArgumentEncodingError(index, literal, "boolean must be 'true' or 'false'")

        case BytesType():
            token = add_0x_prefix(literal.strip())
            if not _HEX_BYTES_PATTERN.match(token):
                raise ArgumentEncodingError(index, literal, f"invalid hex for {type_descriptor.canonical}")
            return decode_hex(token)

        case StringType():
            return literal

        case _:
            raise UnsupportedType(str(type_descriptor))


def _display_value(value: Any) -> str:
    if isinstance(value, (bytes, bytearray)):
        return "0x" + bytes(value).hex()
    return str(value)


def encode_arguments(types: Sequence[TypeDescriptor], values: Sequence[Any]) -> bytes:
    """
    Packs converted argument values using the ABI tuple encoding.  Static values occupy one 32 byte head slot.
    Dynamic values are stored in the tail, and their head slot holds the offset of the tail entry, measured from
    the start of the argument block.

    :param types: parameter types
    :param values: converted values from :func:`convert_argument`
    :return: packed argument block, excluding the function selector
    :raises ArgumentEncodingError: if a value does not fit its declared type
    """
    if len(types) != len(values):
        raise ArgumentEncodingError(
            min(len(types), len(values)), None, f"expected {len(types)} values, got {len(values)}"
        )

    for index, (type_descriptor, value) in enumerate(zip(types, values)):
        match type_descriptor:
            case BytesType(size=size) if size is not None and len(value) != size:
                raise ArgumentEncodingError(
                    index, _display_value(value), f"expected {size} bytes for bytes{size}, got {len(value)}"
                )

    abi_types = [type_descriptor.canonical for type_descriptor in types]
    try:
        return eth_abi_encode(abi_types, list(values))
    except EncodingError as e:
        index = next(
            (i for i, (abi_type, value) in enumerate(zip(abi_types, values)) if not is_encodable(abi_type, value)),
            0,
        )
        raise ArgumentEncodingError(index, _display_value(values[index]), f"{abi_types[index]}: {e}")


def encode_call(
    signature: FunctionSignature | str,
    arguments: Sequence[str],
    trace: TraceHook | None = None,
) -> EncodedCall:
    """
    Encodes a function call from a signature and literal argument strings.

    >>> encode_call("getTransaction(uint256)", ["3"]).call_data_hex
    '0x4f0f4aa90000000000000000000000000000000000000000000000000000000000000003'

    :param signature: FunctionSignature, or signature string like ``balanceOf(address)``
    :param arguments: one literal string per parameter
    :param trace: optional hook called with ``("selector", {...})`` and ``("encoded", {...})`` events
    :return: EncodedCall holding the selector & packed arguments
    """
    if isinstance(signature, str):
        signature = parse_signature(signature)

    parameters = signature.parameters
    if len(arguments) < len(parameters):
        missing = len(arguments)
        raise ArgumentEncodingError(missing, None, f"missing argument for parameter {parameters[missing].canonical}")
    if len(arguments) > len(parameters):
        extra = len(parameters)
        raise ArgumentEncodingError(extra, arguments[extra], f"{signature.canonical} takes {len(parameters)} arguments")

    selector = function_selector(signature)
    if trace:
        trace("selector", {"signature": signature.canonical, "selector": selector.hex()})

    values = [
        convert_argument(index, param, literal) for index, (param, literal) in enumerate(zip(parameters, arguments))
    ]
    packed = encode_arguments(parameters, values) if parameters else b""

    encoded = EncodedCall(signature=signature, selector=selector, arguments=packed)
    logger.debug(f"Encoded {signature.canonical} with {len(values)} arguments into {len(encoded.call_data)} bytes")
    if trace:
        trace("encoded", {"signature": signature.canonical, "call_data": encoded.call_data_hex})

    return encoded
