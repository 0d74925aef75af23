import argparse
import logging
import sys

import commands
from png_errors import PngError


def build_parser():
    parser = argparse.ArgumentParser(
        prog="pngchunk",
        description="Hide, find and remove messages in PNG chunks",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    subparsers = parser.add_subparsers(dest="command", required=True)

    encode = subparsers.add_parser("encode", help="Append a message chunk")
    encode.add_argument("input_path")
    encode.add_argument("chunk_type", help="Four letter chunk type, e.g. ruSt")
    encode.add_argument("message")
    encode.add_argument("output_path", nargs="?", help="Where to write the new image")

    decode = subparsers.add_parser("decode", help="Print the message of a chunk")
    decode.add_argument("input_path")
    decode.add_argument("chunk_type")

    remove = subparsers.add_parser("remove", help="Remove a chunk, rewriting the file")
    remove.add_argument("input_path")
    remove.add_argument("chunk_type")

    print_ = subparsers.add_parser("print", help="List the chunks of an image")
    print_.add_argument("input_path")
    print_.add_argument("--text", action="store_true", help="Also print tEXt, zTXt and iTXt contents")
    print_.add_argument("--plot", metavar="FILE", help="Save a chunk size chart to FILE ('-' to show it)")

    return parser


def run(args):
    if args.command == "encode":
        commands.encode(args.input_path, args.chunk_type, args.message, args.output_path)
    elif args.command == "decode":
        commands.decode(args.input_path, args.chunk_type)
    elif args.command == "remove":
        commands.remove(args.input_path, args.chunk_type)
    elif args.command == "print":
        commands.print_chunks(args.input_path, args.text, args.plot)


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        run(args)
    except (PngError, UnicodeDecodeError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
