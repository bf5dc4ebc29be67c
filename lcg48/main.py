#!/usr/bin/env python3
"""
lcg48 - Console Version
Prints, exports and verifies golden vectors of the 48-bit LCG.
"""
import sys
import argparse
import time
import traceback
from datetime import datetime

from .enums import Derivation
from .settings import Settings
from .utils import parse_seed, f32_bits, f64_bits
from .vectors import VectorSet, generate_vector


def format_value(derivation, value, show_bits=False):
    """Render one derived value for console output."""
    if derivation == Derivation.BYTES:
        return bytes(value).hex()
    if derivation.is_float and show_bits:
        if derivation == Derivation.F32:
            return f"{value!r} (0x{f32_bits(value):08x})"
        return f"{value!r} (0x{f64_bits(value):016x})"
    return repr(value)


def run_verify(path):
    """Replay every vector of a JSON vector set. Returns the number of failures."""
    vector_set = VectorSet.from_json(path)
    print(f"Vectors loaded: {len(vector_set.vectors)}")

    failures = 0
    for vector in vector_set.vectors:
        cfg = vector.config
        index = vector.verify()
        if index == -1:
            print(f"  OK    seed={cfg.seed} derivation={cfg.derivation} count={cfg.count}")
        else:
            failures += 1
            print(f"  FAIL  seed={cfg.seed} derivation={cfg.derivation} first mismatch at index {index}")
    return failures


def run_generate(settings):
    """Capture the configured sequence and print it."""
    settings.validate()
    derivation = settings.get_derivation()

    vector = generate_vector(
        settings.get_seed(),
        derivation,
        settings.get_count(),
        bound=settings.get_bound(),
        byte_length=settings.get_byte_length() if derivation == Derivation.BYTES else None,
    )

    for index, value in enumerate(vector.values):
        print(f"  [{index}] {format_value(derivation, value, settings.is_show_bits())}")

    return VectorSet(vectors=[vector], timestamp=datetime.now().isoformat())


def build_parser():
    parser = argparse.ArgumentParser(
        prog='lcg48',
        description='lcg48 - deterministic 48-bit LCG (java.util.Random sequence)',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  lcg48 --seed 42 --derivation i32 --count 5
  lcg48 --seed 0x2A --derivation i32_bound --bound 10 --output-json vectors.json
  lcg48 --verify vectors.json
        """
    )

    parser.add_argument('--seed', '-s', type=parse_seed, default=0,
                        help='Seed: decimal, hexadecimal (0x...) or negative (default: 0)')
    parser.add_argument('--derivation', '-d', type=str,
                        choices=[d.value for d in Derivation], default=Derivation.U32.value,
                        help='Kind of value to derive (default: u32)')
    parser.add_argument('--count', '-n', type=int, default=10,
                        help='Number of values to derive (default: 10)')
    parser.add_argument('--bound', '-b', type=int, default=None,
                        help='Exclusive upper bound for i32_bound / u32_bound')
    parser.add_argument('--byte-length', type=int, default=16,
                        help='Buffer length for the bytes derivation (default: 16)')
    parser.add_argument('--bits', action='store_true',
                        help='Also print IEEE-754 bit patterns of float values')

    # Export flags
    parser.add_argument('--output-json', type=str, default=None,
                        help='Export the captured vector to a JSON file')
    parser.add_argument('--output-csv', type=str, default=None,
                        help='Export the captured vector to a CSV file')

    parser.add_argument('--verify', type=str, default=None, metavar='PATH',
                        help='Replay every vector in a JSON file and report mismatches')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    print("=" * 60)
    print("lcg48 - Console Version")
    print("=" * 60)

    start_time = time.time()

    try:
        if args.verify:
            print(f"Vector file: {args.verify}")
            print("-" * 60)
            failures = run_verify(args.verify)
            print("=" * 60)
            if failures:
                print(f"Verification failed: {failures} vector(s) do not match")
                sys.exit(1)
            print("All vectors match.")
            return 0

        settings = Settings()
        settings.set_seed(args.seed)
        settings.set_derivation(args.derivation)
        settings.set_count(args.count)
        settings.set_bound(args.bound)
        settings.set_byte_length(args.byte_length)
        settings.set_show_bits(args.bits)
        settings.print()
        print("-" * 60)

        vector_set = run_generate(settings)

        print("=" * 60)
        print(f"Elapsed: {time.time() - start_time:.4f} sec")

        if args.output_json:
            vector_set.to_json(args.output_json)
            print(f"Vectors exported to JSON: {args.output_json}")

        if args.output_csv:
            vector_set.to_csv(args.output_csv)
            print(f"Vectors exported to CSV: {args.output_csv}")

    except Exception as e:
        print()
        print("=" * 60)
        print("Error:")
        print("=" * 60)
        print(f"Error: {e}")
        print(f"Elapsed before error: {time.time() - start_time:.4f} sec")
        print("=" * 60)

        traceback.print_exc()
        sys.exit(1)

    return 0


if __name__ == '__main__':
    main()
