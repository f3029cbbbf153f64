# PassphraseError and friends
# (exceptions raised by word lists and the generator)
#


class PassphraseError(RuntimeError):

    def __init__(self, msg):
        RuntimeError.__init__(self, msg)


class WordListError(PassphraseError):
    pass


class EmptyWordList(WordListError):

    def __init__(self):
        WordListError.__init__(self, "Word list is empty")


class InvalidWordType(WordListError):

    def __init__(self, msg="Word list must contain only strings"):
        WordListError.__init__(self, msg)


class WordListFileNotFound(WordListError, FileNotFoundError):

    def __init__(self, path):
        self.path = str(path)
        WordListError.__init__(self, f"Word list file not found: {self.path}")


class WordListDecodeError(WordListError):

    def __init__(self, path, reason):
        self.path = str(path)
        WordListError.__init__(self, f"Word list file is not valid UTF-8: {self.path} ({reason.reason})")


class InvalidWordListConfig(WordListError):

    def __init__(self):
        WordListError.__init__(self, "Word list config must be an array of strings")


class InvalidExcludedWordsConfig(WordListError):

    def __init__(self):
        WordListError.__init__(self, "Excluded words config must be an array of strings")


class IndexOutOfRange(PassphraseError, IndexError):

    def __init__(self, index: int, count: int):
        self.index, self.count = index, count
        PassphraseError.__init__(self, f"Word index {index} out of range [0, {count})")


class InvalidWordCount(PassphraseError, ValueError):

    def __init__(self, minimum: int, maximum):
        self.minimum, self.maximum = minimum, maximum
        upper = 'unlimited' if maximum is None else maximum
        PassphraseError.__init__(self, f"'num_words' must be between {minimum} and {upper}")


class InvalidEntropyTarget(PassphraseError, ValueError):

    def __init__(self, bits=None):
        self.bits = bits
        PassphraseError.__init__(self, "Target entropy bits must be greater than 0")
