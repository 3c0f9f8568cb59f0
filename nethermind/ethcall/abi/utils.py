SLOT_SIZE = 32
""" Size in bytes of a single ABI head slot """


def add_0x_prefix(hex_str: str) -> str:
    """
    Prefixes a hex string with 0x if the prefix is missing.  Uppercase ``0X`` is normalized to ``0x``

    >>> add_0x_prefix("dead")
    '0xdead'
    >>> add_0x_prefix("0xdead")
    '0xdead'
    """
    if hex_str[:2].lower() == "0x":
        return "0x" + hex_str[2:]
    return "0x" + hex_str


def strip_0x_prefix(hex_str: str) -> str:
    """Removes a leading 0x from a hex string, if present"""
    if hex_str[:2].lower() == "0x":
        return hex_str[2:]
    return hex_str
