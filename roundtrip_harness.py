import argparse
import logging
import sys

from alphabet import DEFAULT_ALPHABET
from arithmetic_coding import DEFAULT_PRECISION
from basin_codec import BasinDecoder, BasinEncoder, CodecConfig
from errors import BasinCodingError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Basin coding round-trip harness")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--text", help="Text to encode/decode")
    source.add_argument("--file", help="Path of a file whose raw bytes are encoded/decoded")
    source.add_argument("--decode", metavar="ENCODED", help="Only decode ENCODED and print the UTF-8 text")
    parser.add_argument("--alphabet", default=DEFAULT_ALPHABET, help="Output alphabet (2-256 unique characters)")
    parser.add_argument("--precision", type=int, default=DEFAULT_PRECISION, help="Word size in bits")
    parser.add_argument("--quiet", action="store_true", help="Do not print the encoded text")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    cfg = CodecConfig(alphabet=args.alphabet, precision=args.precision)
    try:
        encoder = BasinEncoder(config=cfg)
        decoder = BasinDecoder(config=cfg)

        if args.decode is not None:
            print(decoder.decode_to_string(args.decode))
            return 0

        if args.file is not None:
            with open(args.file, "rb") as f:
                data = f.read()
        else:
            data = args.text.encode("utf-8")

        encoded = encoder.encode(data)
        decoded = decoder.decode_bytes(encoded)
    except (BasinCodingError, UnicodeDecodeError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    ok = decoded == data
    print(f"encoded_length={len(encoded)}")
    if not args.quiet:
        print("encoded_text:")
        print(encoded)
    print(f"roundtrip_match={ok}")
    if not ok:
        print("decoded_bytes:")
        print(decoded)
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
