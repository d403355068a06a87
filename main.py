"""
Command line front end for the LZSS codec.
"""

import argparse
import sys

from container import declared_size, is_compressed
from LZSS import LZSS
from testing_lzss import RoundTripTester


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="LZSS compressor",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py compress data.bin -o data.lzss
  python main.py decompress data.lzss -o data.bin
  python main.py info data.lzss
  python main.py selftest ./samples
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command")

    compress_parser = subparsers.add_parser("compress", help="Compress a file")
    compress_parser.add_argument("input", help="File to compress")
    compress_parser.add_argument("-o", "--output", help="Output path (default: INPUT.lzss)")
    compress_parser.add_argument(
        "--window", type=int, default=LZSS.MAX_WINDOW_SIZE, help="Window size (power of two)"
    )
    compress_parser.add_argument(
        "--linear", action="store_true", help="Scan the whole window instead of using the index"
    )
    compress_parser.add_argument("-v", "--verbose", action="store_true")

    decompress_parser = subparsers.add_parser("decompress", help="Decompress a file")
    decompress_parser.add_argument("input", help="Compressed file")
    decompress_parser.add_argument("-o", "--output", help="Output path")
    decompress_parser.add_argument("-v", "--verbose", action="store_true")

    info_parser = subparsers.add_parser("info", help="Show container header")
    info_parser.add_argument("input", help="File to inspect")

    selftest_parser = subparsers.add_parser("selftest", help="Round-trip sample files")
    selftest_parser.add_argument("paths", nargs="*", default=["test"], help="Files or directories")
    selftest_parser.add_argument("-d", "--dir", default="test_results", help="Results directory")

    return parser


def _default_output(input_file: str, command: str) -> str:
    if command == "compress":
        return input_file + ".lzss"
    if input_file.endswith(".lzss"):
        return input_file[: -len(".lzss")]
    return input_file + ".out"


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        if args.command == "compress":
            output = args.output or _default_output(args.input, args.command)
            print(
                LZSS.compress_file(
                    args.input,
                    output,
                    window_size=args.window,
                    use_index=not args.linear,
                    verbose=args.verbose,
                )
            )

        elif args.command == "decompress":
            output = args.output or _default_output(args.input, args.command)
            print(LZSS.decompress_file(args.input, output, verbose=args.verbose))

        elif args.command == "info":
            with open(args.input, "rb") as f:
                header = f.read(8)
            if is_compressed(header):
                print(f"{args.input}: LZSS container, original size {declared_size(header)} bytes")
            else:
                print(f"{args.input}: not an LZSS container")

        elif args.command == "selftest":
            results = RoundTripTester(results_dir=args.dir).run_all_tests(args.paths)
            if not all(r["success"] for r in results):
                return 1

    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
