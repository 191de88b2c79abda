# utils/address.py
import re

from quest_api.core.errors import InvalidAddress

# Starknet field prime; account addresses are field elements below it
FIELD_PRIME = 2**251 + 17 * 2**192 + 1

_HEX_RE = re.compile(r"0[xX]([0-9a-fA-F]+)")
_DEC_RE = re.compile(r"[0-9]+")


def normalize_address(value) -> str:
    """
    Canonical decimal form of a felt address.

    "0x0ABC", "0xabc" and "2748" all normalize to "2748", which is the form
    completion records are stored in.
    """
    if isinstance(value, bool):
        raise InvalidAddress(f"Invalid address: {value!r}")

    if isinstance(value, int):
        felt = value
    elif isinstance(value, str):
        text = value.strip()
        hex_match = _HEX_RE.fullmatch(text)
        if hex_match:
            felt = int(hex_match.group(1), 16)
        elif _DEC_RE.fullmatch(text):
            felt = int(text, 10)
        else:
            raise InvalidAddress(f"Invalid address: {value!r}")
    else:
        raise InvalidAddress(f"Invalid address type: {type(value).__name__}")

    if felt < 0 or felt >= FIELD_PRIME:
        raise InvalidAddress(f"Address out of range: {value!r}")
    return str(felt)
