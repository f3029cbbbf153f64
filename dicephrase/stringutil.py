# capitalize_first
# (string utilities)
#


def capitalize_first(text: str) -> str:
    """Uppercase first character of `text`, keep the rest intact.

    Works on code points, so composed characters like "á" are handled.
    A character without uppercase form (digit, punctuation) stays as is.

    Unlike :meth:`str.capitalize`, the remainder is not lowercased.

    """
    if not text:
        return text
    return text[0].upper() + text[1:]

