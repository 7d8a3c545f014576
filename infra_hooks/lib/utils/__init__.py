from .camel_from_snake import camel_from_snake
from .split_words import split_words, title_case, kebab_case, upper_snake_case
