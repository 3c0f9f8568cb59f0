import pytest

from nethermind.ethcall.abi import parse_return_types, parse_signature, parse_type
from nethermind.ethcall.exceptions import (
    MalformedReturnType,
    MalformedSignature,
    UnsupportedType,
)
from nethermind.ethcall.types import (
    AddressType,
    BoolType,
    BytesType,
    IntegerType,
    StringType,
)


def test_parse_elementary_types():
    assert parse_type("uint256") == IntegerType(bits=256, signed=False)
    assert parse_type("int8") == IntegerType(bits=8, signed=True)
    assert parse_type("uint") == IntegerType(bits=256, signed=False)
    assert parse_type("int") == IntegerType(bits=256, signed=True)
    assert parse_type(" address ") == AddressType()
    assert parse_type("bool") == BoolType()
    assert parse_type("bytes") == BytesType(size=None)
    assert parse_type("bytes32") == BytesType(size=32)
    assert parse_type("string") == StringType()


@pytest.mark.parametrize(
    "type_str",
    ["uint7", "uint264", "int0", "bytes0", "bytes33", "uint256[]", "(uint256,bool)", "fixed128x18", "tuple", ""],
)
def test_unsupported_types(type_str):
    with pytest.raises(UnsupportedType) as exc:
        parse_type(type_str)

    assert exc.value.type_str == type_str.strip()


def test_parse_signature():
    signature = parse_signature("transfer(address,uint256)")

    assert signature.name == "transfer"
    assert signature.parameters == (AddressType(), IntegerType(bits=256, signed=False))
    assert signature.canonical == "transfer(address,uint256)"


def test_parse_signature_normalizes_whitespace_and_aliases():
    signature = parse_signature("  swap( address , uint, int  , bytes4 )  ")

    assert signature.name == "swap"
    assert signature.canonical == "swap(address,uint256,int256,bytes4)"


def test_parse_empty_parameter_list():
    signature = parse_signature("totalSupply()")

    assert signature.parameters == ()
    assert signature.canonical == "totalSupply()"
    assert parse_signature("totalSupply( )").parameters == ()


@pytest.mark.parametrize(
    "signature",
    [
        "bad_signature",
        "(uint256)",
        "transfer(address",
        "two words(uint256)",
        "transfer(address,)",
        "foo(uint256)(bool)",
        "foo((uint256,bool))",
        "",
    ],
)
def test_malformed_signatures(signature):
    with pytest.raises(MalformedSignature):
        parse_signature(signature)


def test_signature_with_unsupported_parameter():
    with pytest.raises(UnsupportedType) as exc:
        parse_signature("batch(address[],uint256)")

    assert exc.value.type_str == "address[]"


def test_parse_return_types():
    assert parse_return_types("(uint256,address)") == (IntegerType(bits=256, signed=False), AddressType())
    assert parse_return_types("uint256, address") == (IntegerType(bits=256, signed=False), AddressType())
    assert parse_return_types(" ( string ) ") == (StringType(),)
    assert parse_return_types(["bool", " bytes "]) == (BoolType(), BytesType())


def test_parse_empty_return_types():
    assert parse_return_types("") == ()
    assert parse_return_types("()") == ()
    assert parse_return_types("  ") == ()


def test_return_types_strip_single_parentheses_layer():
    with pytest.raises(MalformedReturnType) as exc:
        parse_return_types("((uint256,address))")

    assert exc.value.token == "(uint256"


@pytest.mark.parametrize("return_types", ["(uint256,)", "(uint256,,bool)", "(uint256,foo)", "(uint256[])"])
def test_malformed_return_types(return_types):
    with pytest.raises(MalformedReturnType):
        parse_return_types(return_types)
