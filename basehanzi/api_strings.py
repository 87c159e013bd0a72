"""Text-level convenience wrappers (UTF-8 in, UTF-8 out)."""

from .main import basehanzi


def encode_text(text: str, pair_map, use_base64: bool = True, silent: bool | None = None):
    return basehanzi.encode_bytes(text.encode("utf-8"), pair_map, use_base64, silent=silent)


def decode_to_text(text: str, pair_map, use_base64: bool = True, errors: str = "strict"):
    return basehanzi.decode_text(text, pair_map, use_base64).decode("utf-8", errors=errors)


__all__ = [
    "decode_to_text",
    "encode_text",
]
