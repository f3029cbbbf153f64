# Config, create_generator
# (configuration file and generator wiring)
#

import sys
import configparser
from pathlib import Path

from . import pwgen
from .wordlist import WordList
from .errors import InvalidWordListConfig, InvalidExcludedWordsConfig

DATA_DIR = Path('~/.dicephrase')
DEFAULT_CONFIG_FILE = DATA_DIR / 'dicephrase.conf'
SECTION = 'dicephrase'


def build_word_list(word_list=None, excluded_words=(), word_list_path=None) -> WordList:
    """Create word list from configuration values.

    :param word_list:      List of words, or None
    :param excluded_words: Words to be removed from the list
    :param word_list_path: Word list file, used when `word_list` is None
    :returns: Custom list, or bundled EFF list when neither is given.

    The values may come from untyped input (e.g. JSON), their types are checked.

    """
    if excluded_words is None:
        excluded_words = ()
    if not isinstance(excluded_words, (list, tuple)):
        raise InvalidExcludedWordsConfig()
    if word_list is not None:
        if not isinstance(word_list, (list, tuple)):
            raise InvalidWordListConfig()
        base = WordList.from_array(word_list)
    elif word_list_path is not None:
        base = WordList.from_file(Path(word_list_path).expanduser())
    else:
        base = WordList.eff()
    if not excluded_words:
        return base
    return base.exclude_words(excluded_words)


def create_generator(num_words=pwgen.DEFAULT_NUM_WORDS,
                     word_separator=pwgen.DEFAULT_WORD_SEPARATOR,
                     capitalize=pwgen.DEFAULT_CAPITALIZE,
                     include_number=pwgen.DEFAULT_INCLUDE_NUMBER,
                     word_list=None, excluded_words=(), word_list_path=None,
                     max_words=pwgen.MAXIMUM_NUM_WORDS,
                     randomizer=None) -> pwgen.PassphraseGenerator:
    """Create generator with word list and defaults set from configuration values."""
    generator = pwgen.PassphraseGenerator(
        build_word_list(word_list, excluded_words, word_list_path),
        randomizer=randomizer, max_words=max_words)
    return generator.set_defaults(num_words=int(num_words),
                                  word_separator=str(word_separator),
                                  capitalize=bool(capitalize),
                                  include_number=bool(include_number))


def unquote(value: str) -> str:
    """Strip matching quotes, allowing values with surrounding whitespace."""
    if len(value) >= 2 and value[0] == value[-1] and value[0] in '"\'':
        return value[1:-1]
    return value


class Config:

    """Generator settings, optionally loaded from INI file.

    Example::

        [dicephrase]
        num_words = 5
        word_separator = " "
        capitalize = yes
        include_number = no
        word_list_path = ~/words.txt
        excluded_words = bacon eggs

    """

    def __init__(self, config_file=None):
        self.num_words = pwgen.DEFAULT_NUM_WORDS
        self.word_separator = pwgen.DEFAULT_WORD_SEPARATOR
        self.capitalize = pwgen.DEFAULT_CAPITALIZE
        self.include_number = pwgen.DEFAULT_INCLUDE_NUMBER
        self.word_list_path = None
        self.word_list = None
        self.excluded_words = ()
        if config_file is not None:
            self.load(config_file)

    def load(self, config_file):
        config_file = Path(config_file).expanduser()
        config = configparser.ConfigParser(interpolation=None)
        try:
            config.read(config_file, encoding='utf-8')
        except configparser.Error as e:
            raise ValueError(f"malformed config {str(config_file)!r}: {e.message}") from None
        for section in config.sections():
            if section != SECTION:
                self._warn(f"unknown section {section!r} in config {str(config_file)!r}")
                continue
            section = config[section]
            for key in section:
                self._load_value(section, key, config_file)

    def _load_value(self, section, key, config_file):
        try:
            if key == 'num_words':
                self.num_words = section.getint(key)
            elif key == 'word_separator':
                self.word_separator = unquote(section[key])
            elif key == 'capitalize':
                self.capitalize = section.getboolean(key)
            elif key == 'include_number':
                self.include_number = section.getboolean(key)
            elif key == 'word_list_path':
                self.word_list_path = Path(section[key]).expanduser()
            elif key == 'word_list':
                self.word_list = [w.strip() for w in section[key].splitlines() if w.strip()]
            elif key == 'excluded_words':
                self.excluded_words = tuple(section[key].split())
            else:
                self._warn(f"unknown key [{section.name!r}] {key!r} in config {str(config_file)!r}")
        except ValueError:
            raise ValueError(f"invalid value for {key!r} in config {str(config_file)!r}: "
                             f"{section[key]!r}") from None

    @staticmethod
    def _warn(msg):
        print(f"WARNING: {msg}", file=sys.stderr)

    def update(self, **values):
        """Override loaded values, None means keep current value."""
        for key, value in values.items():
            if not hasattr(self, key):
                raise AttributeError(f"unknown config key {key!r}")
            if value is not None:
                setattr(self, key, value)
        return self

    def create_generator(self, randomizer=None,
                         max_words=pwgen.MAXIMUM_NUM_WORDS) -> pwgen.PassphraseGenerator:
        return create_generator(num_words=self.num_words,
                                word_separator=self.word_separator,
                                capitalize=self.capitalize,
                                include_number=self.include_number,
                                word_list=self.word_list,
                                excluded_words=self.excluded_words,
                                word_list_path=self.word_list_path,
                                max_words=max_words,
                                randomizer=randomizer)
