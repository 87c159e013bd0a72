#!/usr/bin/env python3
"""Quick encode/decode benchmark - direct timing only"""
import os
import time


DATA = os.urandom(64 * 1024)
ITERATIONS = 20


def bench_python():
    """Benchmark the pair codec against the bundled sample dictionary"""
    from basehanzi.main import basehanzi
    from basehanzi.sample import SAMPLE_DICTIONARY

    pair_map = basehanzi.build_pair_map(SAMPLE_DICTIONARY)

    start = time.perf_counter()
    for _ in range(ITERATIONS):
        encoded = basehanzi.encode_bytes(DATA, pair_map, silent=True)
    enc_time = time.perf_counter() - start

    start = time.perf_counter()
    for _ in range(ITERATIONS):
        decoded = basehanzi.decode_text(encoded, pair_map)
    dec_time = time.perf_counter() - start

    assert decoded == DATA
    return pair_map, enc_time, dec_time, encoded


def main():
    print(f"Benchmarking encode/decode ({ITERATIONS} iterations)...")
    print(f"Input size: {len(DATA)} bytes\n")

    pair_map, enc_time, dec_time, encoded = bench_python()
    print(f"  Dictionary coverage: {len(pair_map)}/{pair_map.max_pairs} pairs")
    print(f"  Encode: {enc_time:.3f}s ({enc_time/ITERATIONS*1000:.2f} ms/op)")
    print(f"  Decode: {dec_time:.3f}s ({dec_time/ITERATIONS*1000:.2f} ms/op)")
    print(f"  Output chars: {len(encoded)}, UTF-8 bytes: {len(encoded.encode('utf-8'))}")
    print(f"  Output sample: {encoded[:30]}...")

    print("\n✅ Python benchmark complete")


if __name__ == '__main__':
    main()
