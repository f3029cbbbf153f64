# WordList
# (immutable list of words for passphrase generation)
#

import re
import math
import logging
import threading
from pathlib import Path

from .errors import (EmptyWordList, InvalidWordType, WordListFileNotFound,
                     WordListDecodeError, IndexOutOfRange)

WORDLIST_DIR = Path(__file__).parent / 'wordlists'
EFF_WORDLIST_PATH = WORDLIST_DIR / 'eff_large_wordlist.txt'

# Dice format: "11111<TAB>abacus"
RE_DICE_LINE = re.compile(r'^[0-9]+\s+(.+)$')

log = logging.getLogger(__name__)


def parse_lines(lines) -> list:
    """Extract words from lines of a word list file.

    Blank lines are skipped. When the first non-blank line starts with
    a number and whitespace, all lines are treated as dice format and only
    the word part is kept (lines not in that form are kept as they are).

    """
    words = []
    dice_format = None
    for line in lines:
        line = line.strip()
        if not line:
            continue
        if dice_format is None:
            dice_format = RE_DICE_LINE.match(line) is not None
            log.debug("Detected %s word list format", 'dice' if dice_format else 'plain')
        if dice_format:
            m = RE_DICE_LINE.match(line)
            if m:
                line = m.group(1)
        words.append(line)
    return words


class WordList:

    """Ordered, immutable collection of words.

    Create it with :meth:`from_array`, :meth:`from_file` or :meth:`eff`.
    Words are addressed by 0-based position.

    """

    _eff = None
    _eff_lock = threading.Lock()

    def __init__(self, words: tuple):
        self._words = words
        self._count = len(words)

    def __repr__(self):
        return f"{self.__class__.__name__}(<{self._count} words>)"

    def __len__(self):
        return self._count

    def __iter__(self):
        return iter(self._words)

    def __contains__(self, word):
        return word in self._words

    def __getitem__(self, index: int) -> str:
        return self.word_at(index)

    @classmethod
    def from_array(cls, words) -> 'WordList':
        """Create word list from a sequence of strings."""
        if isinstance(words, str):
            raise InvalidWordType()
        words = tuple(words)
        if not words:
            raise EmptyWordList()
        if not all(isinstance(word, str) for word in words):
            raise InvalidWordType()
        return cls(words)

    @classmethod
    def from_file(cls, path) -> 'WordList':
        """Load word list from UTF-8 text file.

        Supports two formats:

        * one word per line
        * dice format: numeric index, whitespace, then word (e.g. "11111\tabacus")

        """
        try:
            with open(path, 'r', encoding='utf-8', newline='') as f:
                contents = f.read()
        except OSError:
            raise WordListFileNotFound(path) from None
        except UnicodeDecodeError as e:
            raise WordListDecodeError(path, e) from None
        words = parse_lines(contents.split('\n'))
        if not words:
            raise EmptyWordList()
        log.debug("Loaded %d words from %r", len(words), str(path))
        return cls(tuple(words))

    @classmethod
    def eff(cls) -> 'WordList':
        """Return the bundled EFF large word list (7776 words).

        The list is loaded on first call and the same instance is returned
        for the rest of the process lifetime.

        """
        wordlist = WordList._eff
        if wordlist is not None:
            return wordlist
        with WordList._eff_lock:
            if WordList._eff is None:
                WordList._eff = WordList.from_file(EFF_WORDLIST_PATH)
            return WordList._eff

    @classmethod
    def eff_path(cls) -> Path:
        return EFF_WORDLIST_PATH

    @classmethod
    def clear_cache(cls):
        """Forget the cached EFF list (for tests)."""
        with WordList._eff_lock:
            WordList._eff = None

    def word_at(self, index: int) -> str:
        """Get the word at position `index`."""
        if index < 0 or index >= self._count:
            raise IndexOutOfRange(index, self._count)
        return self._words[index]

    def random_word(self, randomizer) -> str:
        """Pick one word uniformly at random."""
        return self._words[randomizer.randint(0, self._count - 1)]

    def count(self) -> int:
        return self._count

    def all(self) -> tuple:
        return self._words

    def exclude_words(self, words) -> 'WordList':
        """Return new word list without `words` (exact match).

        Order of remaining words is preserved.

        """
        if isinstance(words, str):
            raise InvalidWordType("Excluded words must contain only strings")
        excluded = tuple(words)
        if not all(isinstance(word, str) for word in excluded):
            raise InvalidWordType("Excluded words must contain only strings")
        excluded = set(excluded)
        remaining = tuple(word for word in self._words if word not in excluded)
        if not remaining:
            raise EmptyWordList()
        return self.__class__(remaining)

    def entropy_per_word(self) -> float:
        """Entropy of one uniformly drawn word, in bits (log2 of word count)."""
        return math.log2(self._count)
