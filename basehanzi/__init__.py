"""
BASEHANZI - base64 pair substitution into CJK ideographs

Every pair of base64 symbols is replaced by one ideograph taken from a
dictionary text, halving the character count of base64 output. The same
dictionary file is required to decode.
"""

from .main import basehanzi, cli, main, HanziDecodeError
from .dictionary import (
    CodecConfig,
    InsufficientDictionaryError,
    PairMap,
    extract_characters,
)
from .api_strings import decode_to_text, encode_text
from .api_files import decode_file, encode_file, generate_sample_dictionary

__version__ = basehanzi.ENGINE_VERSION

DecodeError = HanziDecodeError

# ============================================================================
# DICTIONARY
# ============================================================================

def build_pair_map(text: str, config: CodecConfig | None = None) -> PairMap:
    """
    Build the pair mapping from dictionary text.

    Args:
        text: Any text; only CJK ideographs are consulted
        config: Alphabet/threshold/range settings (defaults to base64 + CJK)

    Returns:
        Immutable PairMap assigning ideographs to pairs in row-major order

    Raises:
        InsufficientDictionaryError: fewer than ``config.min_chars`` ideographs
    """
    return basehanzi.build_pair_map(text, config)


def load_dictionary(path: str | None = None, config: CodecConfig | None = None, silent: bool | None = None) -> PairMap:
    """
    Read a dictionary file and build its PairMap.

    Prints the character count and pair coverage unless silent.
    """
    return basehanzi.load_dictionary(path, config=config, silent=silent)


# ============================================================================
# TRANSFORM (bytes <-> substituted text)
# ============================================================================

def encode(data: bytes, pair_map: PairMap, use_base64: bool = True, silent: bool | None = None) -> str:
    """
    Encode bytes into dictionary text.

    Args:
        data: Bytes to encode
        pair_map: Mapping built from the dictionary
        use_base64: Pair the base64 text of ``data`` (default) or the raw bytes

    Returns:
        Text of dictionary characters; pairs missing from a partial
        dictionary and ``=`` padding are kept literally

    Note:
        - Never fails; a warning reports how many pairs were not mapped
        - Raw mode pads odd-length input with one ``=`` that decode keeps
    """
    return basehanzi.encode_bytes(data, pair_map, use_base64, silent=silent)


def decode(text: str, pair_map: PairMap, use_base64: bool = True) -> bytes:
    """
    Decode dictionary text back to bytes.

    Raises:
        DecodeError: the reconstructed text is not valid base64
    """
    return basehanzi.decode_text(text, pair_map, use_base64)


__all__ = [
    "CodecConfig",
    "DecodeError",
    "HanziDecodeError",
    "InsufficientDictionaryError",
    "PairMap",
    "__version__",
    "basehanzi",
    "build_pair_map",
    "cli",
    "decode",
    "decode_file",
    "decode_to_text",
    "encode",
    "encode_file",
    "encode_text",
    "extract_characters",
    "generate_sample_dictionary",
    "load_dictionary",
    "main",
]
