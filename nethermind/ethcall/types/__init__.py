from .abi import (
    AddressType,
    BoolType,
    BytesType,
    DecodedValue,
    EncodedCall,
    FunctionSignature,
    IntegerType,
    ReturnSchema,
    StringType,
    TypeDescriptor,
)

__all__ = [
    "AddressType",
    "BoolType",
    "BytesType",
    "DecodedValue",
    "EncodedCall",
    "FunctionSignature",
    "IntegerType",
    "ReturnSchema",
    "StringType",
    "TypeDescriptor",
]
