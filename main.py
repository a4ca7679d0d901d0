"""
ChunkCipher — Main Entry Point & Command-Line Driver

Encrypts/decrypts alphanumeric text with a classical cipher, spreading
the work over a fixed number of worker threads.

    chunkcipher -c vigenere -k LEMON -i plain.txt -o secret.txt
    chunkcipher -c vigenere -k LEMON --decrypt -i secret.txt
    chunkcipher --gui
"""

import argparse
import logging
import sys

from config.settings import Settings

from core.cipher_engine import (
    CipherFactory, CipherMode, ConfigurationError, InvalidKey,
    WorkerFailure,
)
from core.chunk_engine  import ChunkedCipherEngine

from utils.text_io import TextIOError, read_input, write_output

logger = logging.getLogger("ChunkCipher.Main")


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  Logging
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def configure_logging(verbose: bool = False):
    root_logger = logging.getLogger()
    level = logging.DEBUG if verbose else getattr(logging, Settings.LOG_LEVEL)
    root_logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(
        Settings.LOG_FORMAT, datefmt=Settings.LOG_DATE_FORMAT,
    ))
    root_logger.addHandler(console_handler)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  Command line
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def _positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'")
    if n <= 0:
        raise argparse.ArgumentTypeError(
            f"thread count must be at least 1, got {n}"
        )
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chunkcipher",
        description=(
            "Encrypts/Decrypts input alphanumeric text using classical "
            "ciphers"
        ),
    )
    parser.add_argument(
        "--version", action="version", version=Settings.APP_VERSION,
    )
    parser.add_argument(
        "-i", dest="input_file", metavar="FILE",
        help="Read text to be processed from FILE "
             "(stdin is used if not supplied)",
    )
    parser.add_argument(
        "-o", dest="output_file", metavar="FILE",
        help="Write processed text to FILE "
             "(stdout is used if not supplied)",
    )
    parser.add_argument(
        "-c", dest="cipher", metavar="CIPHER",
        default=Settings.DEFAULT_CIPHER,
        type=str.lower, choices=CipherFactory.list_ciphers(),
        help="Cipher to use: %(choices)s (default: %(default)s)",
    )
    parser.add_argument(
        "-k", dest="key", metavar="KEY", default=Settings.DEFAULT_KEY,
        help="Cipher KEY; a null key, i.e. no encryption, is used for "
             "caesar if not supplied",
    )
    direction = parser.add_mutually_exclusive_group()
    direction.add_argument(
        "--encrypt", dest="mode", action="store_const",
        const=CipherMode.ENCRYPT, default=CipherMode.ENCRYPT,
        help="Encrypt the input text (default)",
    )
    direction.add_argument(
        "--decrypt", dest="mode", action="store_const",
        const=CipherMode.DECRYPT,
        help="Decrypt the input text",
    )
    parser.add_argument(
        "-t", "--threads", dest="threads", metavar="N",
        type=_positive_int, default=Settings.DEFAULT_WORKERS,
        help="Number of worker threads (default: %(default)s)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log progress and per-chunk detail to stderr",
    )
    parser.add_argument(
        "--gui", action="store_true",
        help="Open the graphical text cipher panel",
    )
    return parser


def _error(msg: str) -> int:
    print(f"[error] {msg}", file=sys.stderr)
    return 1


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  Entry Point
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def run(args: argparse.Namespace, stdin=None, stdout=None) -> int:
    if args.gui:
        from GUI.text_encryption import launch
        return launch()

    try:
        input_text = read_input(args.input_file, stream=stdin)
    except TextIOError as exc:
        return _error(str(exc))

    try:
        cipher = CipherFactory.create(args.cipher, args.key)
    except InvalidKey as exc:
        return _error(f"Invalid key: {exc}")

    try:
        engine = ChunkedCipherEngine(workers=args.threads)
        output_text = engine.run(cipher, input_text, args.mode)
    except ConfigurationError as exc:
        return _error(f"bad configuration: {exc}")
    except WorkerFailure as exc:
        return _error(f"cipher failed: {exc}")

    try:
        write_output(output_text, args.output_file, stream=stdout)
    except TextIOError as exc:
        return _error(str(exc))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    logger.info("%s v%s started", Settings.APP_NAME, Settings.APP_VERSION)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
