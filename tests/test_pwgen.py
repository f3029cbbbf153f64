import re

import pytest

from dicephrase import pwgen
from dicephrase.pwgen import PassphraseGenerator
from dicephrase.wordlist import WordList
from dicephrase.randomizer import SeededRandomizer
from dicephrase.errors import InvalidWordCount, InvalidEntropyTarget

ALPHA_WORDS = ['alpha', 'bravo', 'charlie', 'delta', 'echo', 'foxtrot', 'golf', 'hotel']


class ScriptedRandomizer:

    """Returns prepared values, records requested ranges."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randint(self, low, high):
        self.calls.append((low, high))
        value = self.values.pop(0)
        assert low <= value <= high
        return value


def seeded_generator(seed=42, words=ALPHA_WORDS, **kwargs):
    return PassphraseGenerator(WordList.from_array(words), SeededRandomizer(seed), **kwargs)


class TestNumWords:

    @pytest.mark.parametrize('num_words', [-1, 0, 1, 2, 21, 100])
    def test_out_of_bounds(self, num_words):
        gen = seeded_generator()
        with pytest.raises(InvalidWordCount) as excinfo:
            gen.generate(num_words=num_words)
        assert str(excinfo.value) == "'num_words' must be between 3 and 20"
        assert excinfo.value.minimum == 3
        assert excinfo.value.maximum == 20

    @pytest.mark.parametrize('num_words', range(pwgen.MINIMUM_NUM_WORDS, pwgen.MAXIMUM_NUM_WORDS + 1))
    def test_split_gives_num_words(self, num_words):
        gen = seeded_generator()
        parts = gen.generate(num_words=num_words, word_separator='-').split('-')
        assert len(parts) == num_words
        assert all(parts)

    def test_custom_maximum(self):
        gen = seeded_generator(max_words=30)
        assert len(gen.generate(num_words=30).split('-')) == 30
        with pytest.raises(InvalidWordCount, match="between 3 and 30"):
            gen.generate(num_words=31)

    def test_no_maximum(self):
        gen = seeded_generator(max_words=None)
        assert gen.max_words is None
        assert len(gen.generate(num_words=100).split('-')) == 100
        with pytest.raises(InvalidWordCount, match="between 3 and unlimited"):
            gen.generate(num_words=2)

    def test_maximum_below_minimum(self):
        with pytest.raises(ValueError):
            seeded_generator(max_words=2)

    def test_constants(self):
        assert pwgen.MINIMUM_NUM_WORDS == 3
        assert pwgen.MAXIMUM_NUM_WORDS == 20
        assert pwgen.DEFAULT_NUM_WORDS == 3
        assert pwgen.DEFAULT_WORD_SEPARATOR == '-'
        assert pwgen.DEFAULT_CAPITALIZE is False
        assert pwgen.DEFAULT_INCLUDE_NUMBER is False


def test_deterministic_same_seed():
    first = seeded_generator(seed=123)
    second = seeded_generator(seed=123)
    for _ in range(5):
        kwargs = dict(num_words=6, word_separator='.', capitalize=True, include_number=True)
        assert first.generate(**kwargs) == second.generate(**kwargs)


def test_draws_uniform_indices():
    rnd = ScriptedRandomizer([0, 7, 3])
    gen = PassphraseGenerator(WordList.from_array(ALPHA_WORDS), rnd)
    assert gen.generate() == 'alpha-hotel-delta'
    assert rnd.calls == [(0, 7)] * 3


def test_same_word_may_repeat():
    rnd = ScriptedRandomizer([2, 2, 2])
    gen = PassphraseGenerator(WordList.from_array(ALPHA_WORDS), rnd)
    assert gen.generate() == 'charlie-charlie-charlie'


def test_include_number_position_and_digit():
    # 3 words, then word index 1, then digit 7
    rnd = ScriptedRandomizer([0, 1, 2, 1, 7])
    gen = PassphraseGenerator(WordList.from_array(ALPHA_WORDS), rnd)
    assert gen.generate(include_number=True) == 'alpha-bravo7-charlie'
    assert rnd.calls[3:] == [(0, 2), (0, 9)]


def test_include_number_then_capitalize():
    rnd = ScriptedRandomizer([0, 1, 2, 0, 9])
    gen = PassphraseGenerator(WordList.from_array(ALPHA_WORDS), rnd)
    assert gen.generate(include_number=True, capitalize=True) == 'Alpha9-Bravo-Charlie'


def test_include_number_exactly_one_part():
    gen = seeded_generator(seed=7)
    for _ in range(50):
        parts = gen.generate(num_words=5, include_number=True).split('-')
        with_digit = [p for p in parts if re.search(r'[0-9]$', p)]
        assert len(with_digit) == 1
        assert re.fullmatch(r'[a-z]+[0-9]', with_digit[0])


def test_include_number_covers_all_digits():
    gen = seeded_generator(seed=11)
    digits = set()
    for _ in range(500):
        passphrase = gen.generate(include_number=True)
        digits.update(c for c in passphrase if c.isdigit())
    assert digits == set('0123456789')


def test_include_number_no_words():
    gen = seeded_generator()
    words = []
    gen._include_number_in_words(words)
    assert words == []


def test_no_capitalize_no_number():
    gen = seeded_generator(seed=5)
    for _ in range(20):
        passphrase = gen.generate(num_words=4)
        assert passphrase == passphrase.lower()
        assert not any(c.isdigit() for c in passphrase)


def test_capitalize_words():
    gen = seeded_generator(seed=5)
    for part in gen.generate(num_words=5, capitalize=True).split('-'):
        assert part[0].isupper()
        assert part[1:] == part[1:].lower()


@pytest.mark.parametrize('text, expected', [
    ("hello", "Hello"),
    ("1ello", "1ello"),
    ("", ""),
    ("áéíóú", "Áéíóú"),
    ("ärger", "Ärger"),
    ("hELLO", "HELLO"),
])
def test_capitalize_first_character(text, expected):
    assert PassphraseGenerator.capitalize_first_character(text) == expected


def test_capitalize_unicode_word_list():
    gen = PassphraseGenerator(WordList.from_array(['ábaco', 'éter', 'ñandú']), SeededRandomizer(3))
    for part in gen.generate(num_words=6, capitalize=True, word_separator=' ').split(' '):
        assert part[0] in 'ÁÉÑ'


@pytest.mark.parametrize('separator', ['-', ' ', '_', '.', '::', '', '😀', '👨🏻‍❤️‍💋‍👨🏻'])
def test_separators(separator):
    words = ['alpha', 'bravo', 'charlie']
    rnd = ScriptedRandomizer([0, 1, 2, 2])
    gen = PassphraseGenerator(WordList.from_array(ALPHA_WORDS), rnd)
    result = gen.generate(num_words=4, word_separator=separator)
    assert result == separator.join(words + ['charlie'])


def test_emoji_separator_splits():
    separator = '👨🏻‍❤️‍💋‍👨🏻'
    gen = seeded_generator(seed=9)
    assert len(gen.generate(num_words=4, word_separator=separator).split(separator)) == 4


def test_separator_is_not_capitalized():
    gen = seeded_generator(seed=9)
    passphrase = gen.generate(word_separator='and', capitalize=True)
    assert passphrase.count('and') == 2


class TestDefaults:

    def test_default_generation(self):
        gen = seeded_generator()
        passphrase = gen.generate()
        assert len(passphrase.split('-')) == 3
        assert gen.defaults == dict(num_words=3, word_separator='-',
                                    capitalize=False, include_number=False)

    def test_set_defaults_used_by_generate(self):
        gen = seeded_generator().set_defaults(num_words=5, word_separator=' ',
                                              capitalize=True, include_number=True)
        parts = gen.generate().split(' ')
        assert len(parts) == 5
        assert all(p[0].isupper() for p in parts)
        assert sum(1 for p in parts if p[-1].isdigit()) == 1

    def test_explicit_params_override_defaults(self):
        gen = seeded_generator().set_defaults(num_words=5, word_separator=' ',
                                              capitalize=True, include_number=True)
        passphrase = gen.generate(num_words=3, word_separator='-',
                                  capitalize=False, include_number=False)
        parts = passphrase.split('-')
        assert len(parts) == 3
        assert passphrase == passphrase.lower()
        assert not any(c.isdigit() for c in passphrase)

    def test_set_defaults_returns_self(self):
        gen = seeded_generator()
        assert gen.set_defaults(num_words=4) is gen

    def test_set_defaults_validates_num_words(self):
        gen = seeded_generator()
        with pytest.raises(InvalidWordCount, match="between 3 and 20"):
            gen.set_defaults(num_words=2)
        with pytest.raises(InvalidWordCount):
            gen.set_defaults(num_words=21)
        assert gen.defaults['num_words'] == 3, "unchanged after failure"


class TestEntropy:

    def test_target_selects_num_words(self):
        gen = seeded_generator(words=['a', 'b', 'c', 'd'])
        assert gen.num_words_for_entropy(7) == 4
        assert len(gen.generate(target_entropy_bits=7).split('-')) == 4

    def test_target_overrides_num_words(self):
        gen = seeded_generator(words=['a', 'b', 'c', 'd'])
        assert len(gen.generate(num_words=10, target_entropy_bits=10).split('-')) == 5

    def test_target_respects_minimum(self):
        gen = seeded_generator(words=['a', 'b', 'c', 'd'])
        assert len(gen.generate(target_entropy_bits=1).split('-')) == 3

    def test_target_above_maximum(self):
        gen = seeded_generator(words=['a', 'b', 'c', 'd'])
        with pytest.raises(InvalidWordCount):
            gen.generate(target_entropy_bits=41)

    def test_target_eff(self):
        gen = PassphraseGenerator(randomizer=SeededRandomizer(1))
        # 12.92 bits per word
        assert len(gen.generate(target_entropy_bits=80, word_separator=' ').split(' ')) == 7
        assert len(gen.generate(target_entropy_bits=77.5, word_separator=' ').split(' ')) == 6

    @pytest.mark.parametrize('bits', [0, -1, -0.5])
    def test_invalid_target(self, bits):
        gen = seeded_generator()
        with pytest.raises(InvalidEntropyTarget, match="greater than 0"):
            gen.generate(target_entropy_bits=bits)

    def test_nan_target(self):
        gen = seeded_generator()
        with pytest.raises(InvalidEntropyTarget):
            gen.generate(target_entropy_bits=float('nan'))

    @pytest.mark.parametrize('max_words', [20, None])
    def test_infinite_target(self, max_words):
        gen = seeded_generator(max_words=max_words)
        with pytest.raises(InvalidWordCount):
            gen.generate(target_entropy_bits=float('inf'))

    def test_single_word_list(self):
        gen = seeded_generator(words=['only'])
        assert gen.generate() == 'only-only-only'
        with pytest.raises(InvalidWordCount):
            gen.generate(target_entropy_bits=10)

    def test_entropy_bits(self):
        gen = seeded_generator(words=['a', 'b', 'c', 'd'])
        assert gen.entropy_bits() == 6.0
        assert gen.entropy_bits(5) == 10.0


def test_default_word_list_is_eff():
    gen = PassphraseGenerator()
    assert gen.get_word_list() is WordList.eff()
    assert gen.word_list is WordList.eff()


def test_all_generated_words_are_in_word_list():
    gen = PassphraseGenerator(randomizer=SeededRandomizer(2024))
    eff_words = set(WordList.eff().all())
    for _ in range(100):
        for word in gen.generate(num_words=6, word_separator=' ').split(' '):
            assert word in eff_words


def test_secure_randomizer_by_default():
    gen = PassphraseGenerator(WordList.from_array(ALPHA_WORDS))
    passphrase = gen.generate(num_words=8)
    assert all(word in ALPHA_WORDS for word in passphrase.split('-'))
