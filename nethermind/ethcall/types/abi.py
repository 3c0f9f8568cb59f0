from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class IntegerType:
    """Signed or unsigned integer of ``bits`` width.  Bare ``uint`` & ``int`` resolve to 256 bits"""

    bits: int
    signed: bool

    @property
    def canonical(self) -> str:
        return f"{'int' if self.signed else 'uint'}{self.bits}"

    @property
    def is_dynamic(self) -> bool:
        return False

    @property
    def min_value(self) -> int:
        return -(2 ** (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return 2 ** (self.bits - 1) - 1 if self.signed else 2**self.bits - 1


@dataclass(frozen=True)
class AddressType:
    """20 byte account address"""

    @property
    def canonical(self) -> str:
        return "address"

    @property
    def is_dynamic(self) -> bool:
        return False


@dataclass(frozen=True)
class BoolType:
    """Boolean, encoded as uint8 restricted to 0 or 1"""

    @property
    def canonical(self) -> str:
        return "bool"

    @property
    def is_dynamic(self) -> bool:
        return False


@dataclass(frozen=True)
class BytesType:
    """
    Byte sequence.  If ``size`` is None, the type is the dynamic ``bytes`` type, otherwise it is
    the static ``bytes<size>`` type
    """

    size: int | None = None

    @property
    def canonical(self) -> str:
        return "bytes" if self.size is None else f"bytes{self.size}"

    @property
    def is_dynamic(self) -> bool:
        return self.size is None


@dataclass(frozen=True)
class StringType:
    """Dynamic UTF-8 encoded string"""

    @property
    def canonical(self) -> str:
        return "string"

    @property
    def is_dynamic(self) -> bool:
        return True


TypeDescriptor = Union[IntegerType, AddressType, BoolType, BytesType, StringType]
""" Closed set of ABI types that can be encoded & decoded """

ReturnSchema = tuple[TypeDescriptor, ...]
""" Ordered return types, matching the on-wire tuple order """


@dataclass(frozen=True)
class FunctionSignature:
    """Parsed function signature"""

    name: str
    parameters: tuple[TypeDescriptor, ...] = ()

    @property
    def canonical(self) -> str:
        """Normalized signature used for selector computation, ie ``transfer(address,uint256)``"""
        return f"{self.name}({','.join(param.canonical for param in self.parameters)})"


@dataclass(frozen=True)
class EncodedCall:
    """Encoded call data for a function call"""

    signature: FunctionSignature
    selector: bytes
    arguments: bytes = b""

    @property
    def call_data(self) -> bytes:
        return self.selector + self.arguments

    @property
    def selector_hex(self) -> str:
        return self.selector.hex()

    @property
    def call_data_hex(self) -> str:
        return "0x" + self.call_data.hex()


@dataclass(frozen=True)
class DecodedValue:
    """A single decoded return value, tagged with the type it was decoded against"""

    type: TypeDescriptor
    value: Any
