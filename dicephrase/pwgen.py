# pwgen
# (random passphrase generator)
#

import math

from .wordlist import WordList
from .randomizer import SecureRandomizer
from .stringutil import capitalize_first
from .errors import InvalidWordCount, InvalidEntropyTarget

MINIMUM_NUM_WORDS = 3
# Kept for compatibility with older releases, pass max_words=None to lift it.
MAXIMUM_NUM_WORDS = 20

DEFAULT_NUM_WORDS = 3
DEFAULT_WORD_SEPARATOR = '-'
DEFAULT_CAPITALIZE = False
DEFAULT_INCLUDE_NUMBER = False


class PassphraseGenerator:

    """Generate passphrases from random words of a word list.

    :param word_list:  Source of words, default is the bundled EFF list
    :param randomizer: Object with ``randint(low, high)`` method,
                       default is :class:`SecureRandomizer`
    :param max_words:  Upper bound for number of words, None for no bound

    One generator must not be used from several threads at once
    unless its randomizer is thread-safe (:class:`SecureRandomizer` is).

    """

    def __init__(self, word_list: WordList = None, randomizer=None,
                 max_words=MAXIMUM_NUM_WORDS):
        if max_words is not None and max_words < MINIMUM_NUM_WORDS:
            raise ValueError(f"max_words must be at least {MINIMUM_NUM_WORDS}, got {max_words}")
        self._word_list = word_list if word_list is not None else WordList.eff()
        self._randomizer = randomizer if randomizer is not None else SecureRandomizer()
        self._max_words = max_words
        self._num_words = DEFAULT_NUM_WORDS
        self._word_separator = DEFAULT_WORD_SEPARATOR
        self._capitalize = DEFAULT_CAPITALIZE
        self._include_number = DEFAULT_INCLUDE_NUMBER

    @property
    def word_list(self) -> WordList:
        return self._word_list

    @property
    def max_words(self):
        return self._max_words

    @property
    def defaults(self) -> dict:
        return dict(num_words=self._num_words,
                    word_separator=self._word_separator,
                    capitalize=self._capitalize,
                    include_number=self._include_number)

    def get_word_list(self) -> WordList:
        return self._word_list

    def set_defaults(self,
                     num_words: int = DEFAULT_NUM_WORDS,
                     word_separator: str = DEFAULT_WORD_SEPARATOR,
                     capitalize: bool = DEFAULT_CAPITALIZE,
                     include_number: bool = DEFAULT_INCLUDE_NUMBER) -> 'PassphraseGenerator':
        """Set options used by :meth:`generate` when not given explicitly.

        Returns self, so the call can be chained.

        """
        self._validate_num_words(num_words)
        self._num_words = num_words
        self._word_separator = word_separator
        self._capitalize = capitalize
        self._include_number = include_number
        return self

    def generate(self,
                 num_words: int = None,
                 word_separator: str = None,
                 capitalize: bool = None,
                 include_number: bool = None,
                 target_entropy_bits: float = None) -> str:
        """Generate random passphrase.

        Options left as None take the value set by :meth:`set_defaults`.

        :param num_words:      Number of words
        :param word_separator: String put between words (may be empty)
        :param capitalize:     Uppercase first letter of each word
        :param include_number: Append random digit 0-9 to one random word
        :param target_entropy_bits: Use enough words to reach this entropy.
                               Overrides `num_words`. Only the word choice
                               is counted, not the appended digit.
        :returns: The passphrase.

        """
        if num_words is None:
            num_words = self._num_words
        if word_separator is None:
            word_separator = self._word_separator
        if capitalize is None:
            capitalize = self._capitalize
        if include_number is None:
            include_number = self._include_number

        if target_entropy_bits is not None:
            num_words = self.num_words_for_entropy(target_entropy_bits)

        self._validate_num_words(num_words)

        words = self._generate_words(num_words)
        if include_number:
            self._include_number_in_words(words)
        if capitalize:
            words = [capitalize_first(word) for word in words]
        return word_separator.join(words)

    def num_words_for_entropy(self, target_entropy_bits) -> int:
        """Number of words needed to reach `target_entropy_bits`.

        Never less than the minimum word count. With a single-word list
        the entropy per word is zero, no word count reaches the target
        and :class:`InvalidWordCount` is raised. Same for infinite target.

        """
        if math.isnan(target_entropy_bits) or target_entropy_bits <= 0:
            raise InvalidEntropyTarget(target_entropy_bits)
        entropy_per_word = self._word_list.entropy_per_word()
        if entropy_per_word == 0 or math.isinf(target_entropy_bits):
            raise InvalidWordCount(MINIMUM_NUM_WORDS, self._max_words)
        desired = math.ceil(target_entropy_bits / entropy_per_word)
        return max(desired, MINIMUM_NUM_WORDS)

    def entropy_bits(self, num_words: int = None) -> float:
        """Entropy of word choice in a passphrase of `num_words` words."""
        if num_words is None:
            num_words = self._num_words
        return num_words * self._word_list.entropy_per_word()

    @staticmethod
    def capitalize_first_character(s: str) -> str:
        return capitalize_first(s)

    def _generate_words(self, num_words: int) -> list:
        max_index = self._word_list.count() - 1
        return [self._word_list.word_at(self._randomizer.randint(0, max_index))
                for _ in range(num_words)]

    def _include_number_in_words(self, words: list):
        """Append random digit (0-9) to randomly selected word, in place."""
        if not words:
            return
        i = self._randomizer.randint(0, len(words) - 1)
        digit = self._randomizer.randint(0, 9)
        words[i] += str(digit)

    def _validate_num_words(self, num_words: int):
        if num_words < MINIMUM_NUM_WORDS or \
                (self._max_words is not None and num_words > self._max_words):
            raise InvalidWordCount(MINIMUM_NUM_WORDS, self._max_words)
