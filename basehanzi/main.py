# BASEHANZI PAIR CODEC ->

import os as _os_module
import sys as _sys_module

from .dictionary import (
    CJK_RANGES,
    DEFAULT_MIN_CHARS,
    DEFAULT_PADDING,
    STANDARD_ALPHABET,
    CodecConfig,
    InsufficientDictionaryError,
    PairMap,
    build_pair_map,
)
from .sample import SAMPLE_DICTIONARY


class HanziDecodeError(ValueError):
    """Raised when substituted text does not reconstruct a valid stream."""


class basehanzi:
    import base64
    import binascii
    import enum
    import sys
    import pathlib
    import typing
    import os
    import colorama
    colorama.just_fix_windows_console()

    @staticmethod
    def _env_int(name: str) -> "basehanzi.typing.Optional[int]":
        value = _os_module.getenv(name)
        if not value:
            return None
        try:
            parsed = int(value)
        except (TypeError, ValueError):
            return None
        if parsed < 0:
            return None
        return parsed

    @staticmethod
    def _env_flag(name: str) -> bool:
        raw = _os_module.getenv(name)
        if not raw:
            return False
        return raw.strip().lower() in ("1", "true", "yes", "on")

    ENGINE_VERSION = "1.2.0"
    ALPHABET = STANDARD_ALPHABET
    PAD_CHAR = DEFAULT_PADDING
    CJK_RANGES = CJK_RANGES
    MIN_DICT_CHARS = DEFAULT_MIN_CHARS
    DEFAULT_DICT_FILE = "dictionary.md"
    ENCODED_SUFFIX = ".encoded"
    DECODED_SUFFIX = ".decoded"
    MAX_INPUT_BYTES = 512 * 1024 * 1024  # whole-file, in-memory transform
    _MIN_CHARS_ENV = _env_int("BASEHANZI_MIN_CHARS")
    if _MIN_CHARS_ENV is not None:
        MIN_DICT_CHARS = _MIN_CHARS_ENV
    _MAX_INPUT_ENV = _env_int("BASEHANZI_MAX_INPUT_BYTES")
    if _MAX_INPUT_ENV:
        MAX_INPUT_BYTES = _MAX_INPUT_ENV
    _DICT_ENV = _os_module.getenv("BASEHANZI_DICT")
    if _DICT_ENV:
        DEFAULT_DICT_FILE = _DICT_ENV
    _SILENT_MODE: typing.ClassVar[bool] = _env_flag("BASEHANZI_SILENT")

    InsufficientDictionaryError = InsufficientDictionaryError
    DecodeError = HanziDecodeError
    CodecConfig = CodecConfig
    PairMap = PairMap

    class PairKind(enum.Enum):
        MAPPED = "mapped"
        UNMAPPED = "unmapped"
        LITERAL = "literal"

    class PairOutcome(typing.NamedTuple):
        kind: "basehanzi.PairKind"
        text: str

    class _Reporter:
        """Themed line printer shared by the library output and the CLI."""

        def __init__(self, stream=None, plain: "basehanzi.typing.Optional[bool]" = None):
            self.stream = stream or basehanzi.sys.stdout
            if plain is None:
                is_tty = bool(getattr(self.stream, "isatty", lambda: False)())
                plain = basehanzi._plain_mode() or not is_tty
            self.plain = plain
            colorama = basehanzi.colorama
            self.reset = "" if plain else colorama.Style.RESET_ALL
            self.bold = "" if plain else colorama.Style.BRIGHT
            self.red = "" if plain else colorama.Fore.RED
            self.green = "" if plain else colorama.Fore.GREEN
            self.yellow = "" if plain else colorama.Fore.YELLOW
            self.cyan = "" if plain else colorama.Fore.CYAN

        def _wrap(self, msg: str, color: str, emoji: "str | None" = None) -> str:
            if self.plain:
                return msg
            prefix = f"{emoji} " if emoji else ""
            return f"{self.bold}{color}{prefix}{msg}{self.reset}"

        def ok(self, msg: str) -> str:
            return self._wrap(msg, self.green, "✅")

        def warn(self, msg: str) -> str:
            return self._wrap(msg, self.yellow, "⚠️")

        def err(self, msg: str) -> str:
            return self._wrap(msg, self.red, "❌")

        def info(self, msg: str) -> str:
            return self._wrap(msg, self.cyan)

        def emit(self, msg: str, level: str = "plain") -> None:
            if level != "plain":
                msg = getattr(self, level)(msg)
            print(msg, file=self.stream)

    @staticmethod
    def _cli_config_path() -> "basehanzi.pathlib.Path":
        cfg = _os_module.getenv("BASEHANZI_CLI_CONFIG")
        if cfg:
            return basehanzi.pathlib.Path(cfg).expanduser()
        xdg = _os_module.getenv("XDG_CONFIG_HOME")
        if xdg:
            return basehanzi.pathlib.Path(xdg) / "basehanzi" / "cli.conf"
        appdata = _os_module.getenv("APPDATA")
        if appdata:
            return basehanzi.pathlib.Path(appdata) / "basehanzi" / "cli.conf"
        return basehanzi.pathlib.Path("~/.config/basehanzi/cli.conf").expanduser()

    @staticmethod
    def _plain_mode() -> bool:
        if _os_module.getenv("BASEHANZI_CLI_PLAIN") or _os_module.getenv("NO_COLOR"):
            return True
        style = (_os_module.getenv("BASEHANZI_CLI_STYLE") or "").strip().lower()
        if style in {"plain", "boring", "0", "false", "off"}:
            return True
        if style in {"color", "emoji", "on"}:
            return False
        cfg_path = basehanzi._cli_config_path()
        try:
            if cfg_path.exists():
                data = cfg_path.read_text(encoding="utf-8").lower()
                if "plain=1" in data or "plain=true" in data or "style=plain" in data:
                    return True
        except OSError:
            pass
        return False

    @staticmethod
    def _report(msg: str, level: str = "plain", silent: "basehanzi.typing.Optional[bool]" = None) -> None:
        if basehanzi._SILENT_MODE if silent is None else silent:
            return
        basehanzi._Reporter().emit(msg, level)

    @staticmethod
    def _human_readable_size(num_bytes: int) -> str:
        units = ["B", "KiB", "MiB", "GiB"]
        value = float(num_bytes)
        for unit in units:
            if value < 1024.0 or unit == units[-1]:
                return f"{value:.2f} {unit}"
            value /= 1024.0
        return f"{value:.2f} TiB"

    @staticmethod
    def _normalize_path(path_like: "basehanzi.typing.Union[str, basehanzi.pathlib.Path]") -> "basehanzi.pathlib.Path":
        if isinstance(path_like, basehanzi.pathlib.Path):
            path = path_like
        else:
            path = basehanzi.pathlib.Path(str(path_like))
        return path.expanduser()

    @staticmethod
    def _ensure_existing_file(path: "basehanzi.pathlib.Path", label: str = "Input") -> None:
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(f"{label} file not found: {path}")

    @staticmethod
    def _ensure_size_limit(path: "basehanzi.pathlib.Path", max_bytes: int = None) -> None:
        limit = max_bytes or basehanzi.MAX_INPUT_BYTES
        size = path.stat().st_size
        if size > limit:
            human_size = basehanzi._human_readable_size(size)
            human_limit = basehanzi._human_readable_size(limit)
            raise ValueError(f"{path.name} is {human_size}, exceeding the {human_limit} limit")

    @staticmethod
    def _coerce_bytes(data: "basehanzi.typing.Union[bytes, bytearray, memoryview]") -> bytes:
        if isinstance(data, bytes):
            return data
        if isinstance(data, (bytearray, memoryview)):
            return bytes(data)
        raise TypeError(f"Expected bytes-like input, got {type(data)!r}")

    # DICTIONARY
    @staticmethod
    def default_config() -> CodecConfig:
        return CodecConfig(
            alphabet=basehanzi.ALPHABET,
            min_chars=basehanzi.MIN_DICT_CHARS,
            padding=basehanzi.PAD_CHAR,
            ranges=basehanzi.CJK_RANGES,
        )

    @staticmethod
    def build_pair_map(text: str, config: "basehanzi.typing.Optional[CodecConfig]" = None) -> PairMap:
        return build_pair_map(text, config or basehanzi.default_config())

    @staticmethod
    def load_dictionary(
        path: "basehanzi.typing.Union[str, basehanzi.pathlib.Path, None]" = None,
        config: "basehanzi.typing.Optional[CodecConfig]" = None,
        silent: "basehanzi.typing.Optional[bool]" = None
    ) -> PairMap:
        dict_path = basehanzi._normalize_path(path or basehanzi.DEFAULT_DICT_FILE)
        basehanzi._ensure_existing_file(dict_path, "Dictionary")
        # Undecodable bytes become U+FFFD, which is never a dictionary character.
        text = dict_path.read_bytes().decode("utf-8", errors="replace")
        pair_map = basehanzi.build_pair_map(text, config)
        basehanzi._report(f"Dictionary loaded: {pair_map.total_chars} unique Chinese characters", silent=silent)
        basehanzi._report(
            f"Coverage: {len(pair_map)}/{pair_map.max_pairs} pairs ({pair_map.coverage_percent:.1f}%)",
            silent=silent
        )
        return pair_map

    @staticmethod
    def generate_sample_dictionary(
        path: "basehanzi.typing.Union[str, basehanzi.pathlib.Path, None]" = None
    ) -> str:
        out_path = basehanzi._normalize_path(path or basehanzi.DEFAULT_DICT_FILE)
        out_path.write_text(SAMPLE_DICTIONARY, encoding="utf-8")
        return str(out_path)

    # TRANSFORM
    @staticmethod
    def classify_pair(segment: bytes, pair_map: PairMap) -> "basehanzi.PairOutcome":
        """Resolve one two-byte segment of the intermediate stream."""
        alphabet = pair_map.config.alphabet
        if len(segment) == 2 and segment.isascii():
            pair = segment.decode("ascii")
            if pair[0] in alphabet and pair[1] in alphabet:
                char = pair_map.char_for(pair)
                if char is not None:
                    return basehanzi.PairOutcome(basehanzi.PairKind.MAPPED, char)
                return basehanzi.PairOutcome(basehanzi.PairKind.UNMAPPED, pair)
        return basehanzi.PairOutcome(
            basehanzi.PairKind.LITERAL,
            segment.decode("utf-8", errors="surrogateescape")
        )

    @staticmethod
    def _intermediate_stream(data: bytes, use_base64: bool, padding: str) -> bytes:
        stream = basehanzi.base64.b64encode(data) if use_base64 else data
        if len(stream) % 2:
            stream += padding.encode("ascii")
        return stream

    @staticmethod
    def _encode_stream(stream: bytes, pair_map: PairMap) -> "basehanzi.typing.Tuple[str, int]":
        out = bytearray()
        unmapped = 0
        for offset in range(0, len(stream), 2):
            segment = stream[offset:offset + 2]
            outcome = basehanzi.classify_pair(segment, pair_map)
            if outcome.kind is basehanzi.PairKind.MAPPED:
                out += outcome.text.encode("utf-8")
                continue
            if outcome.kind is basehanzi.PairKind.UNMAPPED:
                unmapped += 1
            out += segment
        # Decoded as one buffer: a UTF-8 sequence may span two literal segments.
        return bytes(out).decode("utf-8", errors="surrogateescape"), unmapped

    @staticmethod
    def encode_bytes(
        data: "basehanzi.typing.Union[bytes, bytearray, memoryview]",
        pair_map: PairMap,
        use_base64: bool = True,
        silent: "basehanzi.typing.Optional[bool]" = None
    ) -> str:
        raw = basehanzi._coerce_bytes(data)
        stream = basehanzi._intermediate_stream(raw, use_base64, pair_map.config.padding)
        text, unmapped = basehanzi._encode_stream(stream, pair_map)
        if unmapped:
            basehanzi._report(f"Warning: {unmapped} pairs not in dictionary", "warn", silent=silent)
        return text

    @staticmethod
    def _reconstruct_stream(text: str, pair_map: PairMap) -> str:
        pieces = []
        for char in text:
            pair = pair_map.pair_for(char)
            pieces.append(char if pair is None else pair)
        return "".join(pieces)

    @staticmethod
    def decode_text(
        text: str,
        pair_map: PairMap,
        use_base64: bool = True
    ) -> bytes:
        if not isinstance(text, str):
            raise TypeError(f"Expected str input, got {type(text)!r}")
        stream = basehanzi._reconstruct_stream(text, pair_map)
        if use_base64:
            cleaned = stream.replace("\r", "").replace("\n", "")
            try:
                return basehanzi.binascii.a2b_base64(cleaned, strict_mode=True)
            except ValueError as exc:
                raise HanziDecodeError(f"invalid base64 payload: {exc}") from exc
        try:
            return stream.encode("utf-8", errors="surrogateescape")
        except UnicodeEncodeError as exc:
            raise HanziDecodeError(f"raw payload is not representable as bytes: {exc}") from exc

    # FILES
    @staticmethod
    def encode_file(
        input_path: "basehanzi.typing.Union[str, basehanzi.pathlib.Path]",
        output_path: "basehanzi.typing.Union[str, basehanzi.pathlib.Path, None]" = None,
        pair_map: "basehanzi.typing.Optional[PairMap]" = None,
        use_base64: bool = True,
        silent: "basehanzi.typing.Optional[bool]" = None
    ) -> str:
        if pair_map is None:
            pair_map = basehanzi.load_dictionary(silent=silent)
        path = basehanzi._normalize_path(input_path)
        basehanzi._ensure_existing_file(path)
        basehanzi._ensure_size_limit(path)
        out_path = basehanzi._normalize_path(output_path or f"{path}{basehanzi.ENCODED_SUFFIX}")
        data = path.read_bytes()
        encoded = basehanzi.encode_bytes(data, pair_map, use_base64, silent=silent)
        blob = encoded.encode("utf-8", errors="surrogateescape")
        out_path.write_bytes(blob)
        basehanzi._report(f"Original size: {len(data)} bytes", silent=silent)
        if use_base64:
            b64_size = 4 * ((len(data) + 2) // 3)
            basehanzi._report(f"Base64 size: {b64_size} bytes", silent=silent)
        basehanzi._report(
            f"Encoded size: {len(blob)} bytes ({basehanzi._human_readable_size(len(blob))})",
            silent=silent
        )
        basehanzi._report(f"Encoding complete: output saved to {out_path}", "ok", silent=silent)
        return str(out_path)

    @staticmethod
    def decode_file(
        input_path: "basehanzi.typing.Union[str, basehanzi.pathlib.Path]",
        output_path: "basehanzi.typing.Union[str, basehanzi.pathlib.Path, None]" = None,
        pair_map: "basehanzi.typing.Optional[PairMap]" = None,
        use_base64: bool = True,
        silent: "basehanzi.typing.Optional[bool]" = None
    ) -> str:
        if pair_map is None:
            pair_map = basehanzi.load_dictionary(silent=silent)
        path = basehanzi._normalize_path(input_path)
        basehanzi._ensure_existing_file(path)
        basehanzi._ensure_size_limit(path)
        out_path = basehanzi._normalize_path(output_path or f"{path}{basehanzi.DECODED_SUFFIX}")
        text = path.read_bytes().decode("utf-8", errors="surrogateescape")
        decoded = basehanzi.decode_text(text, pair_map, use_base64)
        out_path.write_bytes(decoded)
        basehanzi._report(f"Decoding complete: {len(decoded)} bytes written to {out_path}", "ok", silent=silent)
        return str(out_path)


def cli(argv=None) -> int:
    import argparse

    parser = argparse.ArgumentParser(
        prog="basehanzi",
        description="Re-express base64 data as CJK ideographs drawn from a dictionary text"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {basehanzi.ENGINE_VERSION}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    def _add_dict_arg(sub) -> None:
        sub.add_argument(
            "--dict",
            dest="dict_path",
            default=None,
            help=f"Dictionary file path (default: {basehanzi.DEFAULT_DICT_FILE})"
        )

    def _add_raw_arg(sub) -> None:
        sub.add_argument(
            "--raw", "--no-b64",
            dest="use_base64",
            action="store_false",
            help="Pair the input bytes directly instead of their base64 text"
        )
        sub.set_defaults(use_base64=True)

    encode = subparsers.add_parser("encode", help="Encode a file into dictionary characters")
    encode.add_argument("input", help="Input file path")
    encode.add_argument("-o", "--output", default=None, help="Output path (default: <input>.encoded)")
    _add_dict_arg(encode)
    _add_raw_arg(encode)

    decode = subparsers.add_parser("decode", help="Decode a dictionary-encoded file")
    decode.add_argument("input", help="Input file path")
    decode.add_argument("-o", "--output", default=None, help="Output path (default: <input>.decoded)")
    _add_dict_arg(decode)
    _add_raw_arg(decode)

    gen_dict = subparsers.add_parser("gen-dict", help="Write the bundled sample dictionary")
    gen_dict.add_argument(
        "-o", "--output",
        default=None,
        help=f"Dictionary path to write (default: {basehanzi.DEFAULT_DICT_FILE})"
    )

    info = subparsers.add_parser("dict-info", help="Show dictionary coverage statistics")
    _add_dict_arg(info)

    text_enc = subparsers.add_parser("text-enc", help="Encode UTF-8 text and print the result")
    text_enc.add_argument("text", help="Input text")
    _add_dict_arg(text_enc)
    _add_raw_arg(text_enc)

    text_dec = subparsers.add_parser("text-dec", help="Decode dictionary text back to UTF-8")
    text_dec.add_argument("text", help="Encoded text")
    _add_dict_arg(text_dec)
    _add_raw_arg(text_dec)

    args = parser.parse_args(argv)
    theme = basehanzi._Reporter()
    errors = basehanzi._Reporter(stream=basehanzi.sys.stderr)

    if args.command == "gen-dict":
        try:
            out_path = basehanzi.generate_sample_dictionary(args.output)
        except OSError as exc:
            errors.emit(f"Error: {exc}", "err")
            return 1
        theme.emit(f"Sample dictionary generated: {out_path}", "ok")
        return 0

    # Text commands keep stdout clean for the payload itself.
    quiet = args.command in ("text-enc", "text-dec") or None
    try:
        pair_map = basehanzi.load_dictionary(args.dict_path, silent=quiet)
    except Exception as exc:
        errors.emit(f"Dictionary error: {exc}", "err")
        return 1

    if args.command == "dict-info":
        theme.emit(f"Dictionary pairs assigned: {len(pair_map)}", "info")
        if not pair_map.complete:
            theme.emit(
                f"{pair_map.max_pairs - len(pair_map)} pairs will pass through unchanged",
                "warn"
            )
        return 0

    if args.command == "encode":
        try:
            basehanzi.encode_file(args.input, args.output, pair_map, args.use_base64)
        except Exception as exc:
            errors.emit(f"Encoding error: {exc}", "err")
            return 1
        return 0

    if args.command == "decode":
        try:
            basehanzi.decode_file(args.input, args.output, pair_map, args.use_base64)
        except Exception as exc:
            errors.emit(f"Decoding error: {exc}", "err")
            return 1
        return 0

    if args.command == "text-enc":
        try:
            # Undecodable argv bytes arrive as surrogate escapes.
            data = args.text.encode("utf-8", errors="surrogateescape")
            print(basehanzi.encode_bytes(data, pair_map, args.use_base64, silent=True))
        except Exception as exc:
            errors.emit(f"Encoding error: {exc}", "err")
            return 1
        return 0

    if args.command == "text-dec":
        try:
            decoded = basehanzi.decode_text(args.text, pair_map, args.use_base64)
            print(decoded.decode("utf-8"))
        except Exception as exc:
            errors.emit(f"Decoding error: {exc}", "err")
            return 1
        return 0

    return 0


def main(argv=None) -> int:
    try:
        return cli(argv)
    except KeyboardInterrupt:
        print("Exiting...")
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
