import sys
import argparse

import pyperclip

from . import pwgen
from .config import Config, DEFAULT_CONFIG_FILE
from .errors import PassphraseError

DEFAULT_COUNT = 10


def copy_to_clipboard(text):
    """Wraps copy-to-clipboard function to allow overriding."""
    pyperclip.copy(text)


def run_generate(config_file, count, copy, max_words, target_entropy_bits, **options):
    cfg = Config(config_file)
    cfg.update(**options)
    if options.get('word_list_path') is not None:
        # file from command line beats words listed in config
        cfg.word_list = None
    generator = cfg.create_generator(max_words=max_words)
    passphrase = None
    for _ in range(count):
        passphrase = generator.generate(target_entropy_bits=target_entropy_bits)
        print(passphrase)
    if copy and passphrase is not None:
        copy_to_clipboard(passphrase)
        print("(copied to clipboard)", file=sys.stderr)


def parse_args(argv=None):
    """Process command line args."""
    ap = argparse.ArgumentParser(prog="dicephrase",
                                 description="Generate random passphrases from a word list",
                                 formatter_class=argparse.RawTextHelpFormatter)
    ap.add_argument('-c', '--config', dest='config_file',
                    default=DEFAULT_CONFIG_FILE,
                    help="config file (default: %(default)s)")
    ap.add_argument('-n', dest='num_words', type=int,
                    help=f"number of words (default: {pwgen.DEFAULT_NUM_WORDS})")
    ap.add_argument('-s', dest='word_separator',
                    help=f"word separator (default: {pwgen.DEFAULT_WORD_SEPARATOR!r})")
    ap.add_argument('-C', '--capitalize', dest='capitalize', action='store_const', const=True,
                    help="capitalize first letter of each word")
    ap.add_argument('-d', '--digit', dest='include_number', action='store_const', const=True,
                    help="append a random digit to one of the words")
    ap.add_argument('-e', '--entropy', dest='target_entropy_bits', type=float,
                    help="choose number of words to reach this entropy (bits)")
    ap.add_argument('-w', '--word-list', dest='word_list_path',
                    help="word list file, one word per line or dice format "
                         "(default: bundled EFF large list)")
    ap.add_argument('-x', '--exclude', dest='excluded_words', nargs='+', metavar='WORD',
                    help="remove these words from the word list")
    ap.add_argument('-k', dest='count', type=int, default=DEFAULT_COUNT,
                    help="how many passphrases to generate (default: %(default)s)")
    ap.add_argument('--max-words', type=int, default=pwgen.MAXIMUM_NUM_WORDS,
                    help="upper bound for number of words, 0 for no bound "
                         "(default: %(default)s)")
    ap.add_argument('--copy', action='store_true',
                    help="copy the last passphrase to clipboard")
    args = ap.parse_args(args=argv)
    if args.max_words == 0:
        args.max_words = None
    return args


def main(argv=None):
    """Main program

    :param argv: Used in tests. Default is sys.argv
    :return: Exit status
    """
    args = parse_args(argv)
    try:
        run_generate(**vars(args))
    except (PassphraseError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
