import re

_separators = re.compile(r"[^A-Za-z0-9]+")

# acronyms, capitalized words, lowercase words, single capitals, digit runs
_words = re.compile(r"[A-Z]{2,}(?=[A-Z][a-z]+[0-9]*|\b)|[A-Z]?[a-z]+[0-9]*|[A-Z]|[0-9]+")


def split_words(v: str) -> list[str]:
    """Split a string into words on separators and camelCase boundaries

    Example::

        split_words("orderItem")      # ["order", "Item"]
        split_words("order-item_v2")  # ["order", "item", "v2"]
        split_words("HTTPRequest")    # ["HTTP", "Request"]

    :param v: Any string
    :return: List of words, empty if ``v`` holds no letters or digits
    """
    return _words.findall(_separators.sub(" ", v))


def title_case(v: str) -> str:
    return "".join(word[0].upper() + word[1:] for word in split_words(v))


def kebab_case(v: str) -> str:
    return "-".join(word.lower() for word in split_words(v))


def upper_snake_case(v: str) -> str:
    return "_".join(word.upper() for word in split_words(v))
