"""File-oriented convenience wrappers."""

from .main import basehanzi


def generate_sample_dictionary(path: str | None = None):
    return basehanzi.generate_sample_dictionary(path)


def encode_file(
    file: str,
    output: str | None = None,
    *,
    dictionary: str | None = None,
    pair_map=None,
    use_base64: bool = True,
    silent: bool | None = None,
):
    if pair_map is None:
        pair_map = basehanzi.load_dictionary(dictionary, silent=silent)
    return basehanzi.encode_file(
        file,
        output,
        pair_map=pair_map,
        use_base64=use_base64,
        silent=silent,
    )


def decode_file(
    file: str,
    output: str | None = None,
    *,
    dictionary: str | None = None,
    pair_map=None,
    use_base64: bool = True,
    silent: bool | None = None,
):
    if pair_map is None:
        pair_map = basehanzi.load_dictionary(dictionary, silent=silent)
    return basehanzi.decode_file(
        file,
        output,
        pair_map=pair_map,
        use_base64=use_base64,
        silent=silent,
    )


__all__ = [
    "decode_file",
    "encode_file",
    "generate_sample_dictionary",
]
