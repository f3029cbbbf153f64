#!/usr/bin/env python3
# benchmark.py - measure word list loading and passphrase generation
#

import timeit
import argparse

from dicephrase.wordlist import WordList
from dicephrase.pwgen import PassphraseGenerator
from dicephrase.randomizer import SecureRandomizer, SeededRandomizer


def bench(name, func, number):
    secs = timeit.timeit(func, number=number)
    print(f"{name:<40} {secs / number * 1e6:10.2f} us/op  ({number} runs)")


def main():
    ap = argparse.ArgumentParser(description="dicephrase micro-benchmarks")
    ap.add_argument('-n', dest='number', type=int, default=10000,
                    help="iterations per case (default: %(default)s)")
    args = ap.parse_args()
    n = args.number

    bench("load EFF list from file", lambda: WordList.from_file(WordList.eff_path()), max(n // 1000, 1))
    words = WordList.eff()
    bench("exclude 3 words", lambda: words.exclude_words(['abacus', 'zoom', 'unicorn']), max(n // 100, 1))

    providers = (('secure', SecureRandomizer()), ('seeded', SeededRandomizer(42)))
    for provider_name, randomizer in providers:
        gen = PassphraseGenerator(words, randomizer)
        bench(f"generate 3 words ({provider_name})", lambda: gen.generate(), n)
        bench(f"generate 10 words ({provider_name})", lambda: gen.generate(num_words=10), n)
        bench(f"generate all options ({provider_name})",
              lambda: gen.generate(num_words=6, word_separator=' ', capitalize=True, include_number=True), n)
        bench(f"generate 80 bits ({provider_name})", lambda: gen.generate(target_entropy_bits=80), n)


if __name__ == '__main__':
    main()
