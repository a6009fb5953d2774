"""Command-line front end: print passphrases without starting the GUI."""

import argparse
import logging
import sys
from typing import List, Optional

from .config import ConfigurationStore, MAX_WORDS, MIN_WORDS, PassphraseConfig
from .errors import WuerfelwareError
from .generator import PassphraseGenerator

logger = logging.getLogger("wuerfelware")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wuerfelware-cli",
        description="Generate Diceware-style passphrases from a word list.",
    )
    parser.add_argument("-w", "--words", type=int, default=None,
                        help=f"words per passphrase ({MIN_WORDS}-{MAX_WORDS}, out of range values are clamped; "
                             "default: stored setting)")
    parser.add_argument("-n", "--count", type=int, default=1, help="number of passphrases (default: 1)")
    parser.add_argument("-l", "--wordlist", default=None,
                        help="word list file (default: stored path, else the bundled list)")
    parser.add_argument("--save", action="store_true", help="remember --words and --wordlist for next time")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: Optional[List[str]] = None, generator: Optional[PassphraseGenerator] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    if args.count < 1:
        logger.error("--count must be at least 1")
        return 2

    generator = generator if generator is not None else PassphraseGenerator(ConfigurationStore())

    try:
        passphrases = generator.generate(args.wordlist, args.words, args.count)
    except (WuerfelwareError, OSError) as exc:
        logger.error("%s", exc)
        return 1

    # only remember settings that just produced a passphrase
    if args.save:
        if args.words is not None:
            generator.store.save(PassphraseConfig(args.words))
        if args.wordlist:
            generator.store.set_word_list_path(args.wordlist)

    for phrase in passphrases:
        print(phrase)
    return 0


if __name__ == "__main__":
    sys.exit(main())
