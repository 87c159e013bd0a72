#!/usr/bin/env python3
"""
Generate dictionaries and payloads for exercising the pair codec by hand.
Writes threshold-boundary dictionaries (255/256/300/4096 ideographs) plus a
few payload files into the target directory.
"""
import os
import sys
from pathlib import Path

DICTIONARY_SIZES = (255, 256, 300, 4096)
PAYLOADS = {
    "empty.bin": b"",
    "one_zero.bin": b"\x00",
    "random_1k.bin": None,
    "odd.txt": b"abc",
    "utf8.txt": "naïve café, 你好\n".encode("utf-8"),
}


def ideographs(count, start=0x4E00):
    """Return ``count`` consecutive CJK ideographs."""
    return "".join(chr(start + i) for i in range(count))


def write_dictionary(output_dir, count):
    path = output_dir / f"dict_{count}.md"
    path.write_text(f"# {count} ideographs\n{ideographs(count)}\n", encoding="utf-8")
    print(f"  ✓ {path}")


def write_payload(output_dir, name, data):
    path = output_dir / name
    path.write_bytes(os.urandom(1024) if data is None else data)
    print(f"  ✓ {path}")


def main():
    output_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("corpus")
    output_dir.mkdir(parents=True, exist_ok=True)

    print(f"Generating dictionaries in {output_dir}")
    for count in DICTIONARY_SIZES:
        write_dictionary(output_dir, count)

    print(f"Generating payloads in {output_dir}")
    for name, data in PAYLOADS.items():
        write_payload(output_dir, name, data)

    print("\nTry:")
    print(f"  python -m basehanzi encode {output_dir / 'random_1k.bin'} --dict {output_dir / 'dict_300.md'}")


if __name__ == "__main__":
    main()
