"""Name mangling: casing, inflection and relationship naming."""

from __future__ import annotations

import re
from typing import Any

_UPPERCASE_WORDS = frozenset(
    {
        "acl",
        "api",
        "ascii",
        "cpu",
        "eof",
        "guid",
        "id",
        "ip",
        "json",
        "ram",
        "sla",
        "udp",
        "ui",
        "uid",
        "uuid",
        "uri",
        "url",
        "utf8",
    }
)

_UNCOUNTABLE = frozenset(
    {
        "equipment",
        "information",
        "rice",
        "money",
        "species",
        "series",
        "fish",
        "sheep",
        "jeans",
        "police",
    }
)

_IRREGULAR = {
    "person": "people",
    "man": "men",
    "child": "children",
    "sex": "sexes",
    "move": "moves",
    "zombie": "zombies",
}
_IRREGULAR_REVERSE = {plural_form: single for single, plural_form in _IRREGULAR.items()}


def _rules(pairs: list[tuple[str, str]]) -> list[tuple[re.Pattern[str], str]]:
    return [(re.compile(pattern, re.IGNORECASE), repl) for pattern, repl in pairs]


# Ordered by priority: the first rule that matches wins.
_PLURAL_RULES = _rules(
    [
        (r"(quiz)$", r"\1zes"),
        (r"^(oxen)$", r"\1"),
        (r"^(ox)$", r"\1en"),
        (r"^(m|l)ice$", r"\1ice"),
        (r"^(m|l)ouse$", r"\1ice"),
        (r"(matr|vert|ind)(?:ix|ex)$", r"\1ices"),
        (r"(x|ch|ss|sh)$", r"\1es"),
        (r"([^aeiouy]|qu)y$", r"\1ies"),
        (r"(hive)$", r"\1s"),
        (r"(?:([^f])fe|([lr])f)$", r"\1\2ves"),
        (r"sis$", "ses"),
        (r"([ti])a$", r"\1a"),
        (r"([ti])um$", r"\1a"),
        (r"(buffal|tomat)o$", r"\1oes"),
        (r"(bu)s$", r"\1ses"),
        (r"(alias|status)$", r"\1es"),
        (r"(octop|vir)i$", r"\1i"),
        (r"(octop|vir)us$", r"\1i"),
        (r"^(ax|test)is$", r"\1es"),
        (r"s$", "s"),
        (r"$", "s"),
    ]
)

_SINGULAR_RULES = _rules(
    [
        (r"(database)s$", r"\1"),
        (r"(quiz)zes$", r"\1"),
        (r"(matr)ices$", r"\1ix"),
        (r"(vert|ind)ices$", r"\1ex"),
        (r"^(ox)en", r"\1"),
        (r"(alias|status)(es)?$", r"\1"),
        (r"(octop|vir)(us|i)$", r"\1us"),
        (r"^(a)x[ie]s$", r"\1xis"),
        (r"(cris|test)(is|es)$", r"\1is"),
        (r"(shoe)s$", r"\1"),
        (r"(o)es$", r"\1"),
        (r"(bus)(es)?$", r"\1"),
        (r"^(m|l)ice$", r"\1ouse"),
        (r"(x|ch|ss|sh)es$", r"\1"),
        (r"(m)ovies$", r"\1ovie"),
        (r"(s)eries$", r"\1eries"),
        (r"([^aeiouy]|qu)ies$", r"\1y"),
        (r"([lr])ves$", r"\1f"),
        (r"(tive)s$", r"\1"),
        (r"(hive)s$", r"\1"),
        (r"([^f])ves$", r"\1fe"),
        (r"(^analy)(sis|ses)$", r"\1sis"),
        (
            r"((a)naly|(b)a|(d)iagno|(p)arenthe|(p)rogno|(s)ynop|(t)he)(sis|ses)$",
            r"\1sis",
        ),
        (r"([ti])a$", r"\1um"),
        (r"(n)ews$", r"\1ews"),
        (r"(ss)$", r"\1"),
        (r"s$", ""),
    ]
)

_IDENTIFIER_SUFFIXES = ("_id", "_uuid", "_guid", "_oid")


def _inflect_word(
    word: str,
    irregular: dict[str, str],
    rules: list[tuple[re.Pattern[str], str]],
) -> str:
    lowered = word.lower()
    if not word or lowered in _UNCOUNTABLE:
        return word
    if lowered in irregular:
        replacement = irregular[lowered]
        return word[0] + replacement[1:]
    for pattern, repl in rules:
        if pattern.search(word):
            return pattern.sub(repl, word, count=1)
    return word


def _inflect_last(name: str, irregular: dict[str, str], rules) -> str:
    parts = name.split("_")
    last = parts[-1]
    if len(last) > 1:
        parts[-1] = _inflect_word(last, irregular, rules)
    return "_".join(parts)


def plural(word: str) -> str:
    """Pluralise the last underscore-separated word of ``word``."""
    return _inflect_last(word, _IRREGULAR, _PLURAL_RULES)


def singular(word: str) -> str:
    """Singularise the last underscore-separated word of ``word``."""
    return _inflect_last(word, _IRREGULAR_REVERSE, _SINGULAR_RULES)


def _title_word(word: str) -> str:
    if word in _UPPERCASE_WORDS:
        return word.upper()
    return word[0].upper() + word[1:]


def title_case(name: str) -> str:
    """Turn ``snake_case`` into ``TitleCase``, upper-casing known initialisms."""
    return "".join(_title_word(word) for word in name.split("_") if word)


def camel_case(name: str) -> str:
    """Turn ``snake_case`` into ``camelCase``; the first word is kept as is."""
    words = [word for word in name.split("_") if word]
    if not words:
        return ""
    return words[0] + "".join(_title_word(word) for word in words[1:])


def trim_suffixes(name: str) -> str:
    """Strip the first identifier suffix (``_id``, ``_uuid``...) that matches."""
    for suffix in _IDENTIFIER_SUFFIXES:
        if name.endswith(suffix):
            return name[: -len(suffix)]
    return name


def txt_name_to_one(fk: Any) -> tuple[str, str]:
    """Names for both sides of a one-to-one or one-to-many relationship.

    The local name belongs to the side holding the foreign key.
    """
    trimmed = singular(trim_suffixes(fk.column))
    singular_foreign_table = singular(fk.foreign_table)
    fk_not_table_name = trimmed != singular_foreign_table

    if trimmed == singular_foreign_table:
        foreign_fn = title_case(singular(fk.table) + "_" + trimmed)
        if fk.column != singular_foreign_table:
            foreign_fn = title_case(trimmed)
    elif trimmed == fk.column:
        foreign_fn = title_case(trimmed + "_" + singular_foreign_table)
    else:
        foreign_fn = title_case(trimmed)

    local_fn = title_case(trimmed) if fk_not_table_name else ""
    plurality = singular if fk.unique else plural
    local_fn += title_case(plurality(fk.table))
    return local_fn, foreign_fn


def txt_name_to_many(lhs: Any, rhs: Any) -> tuple[str, str]:
    """Names for both sides of a many-to-many relationship through a join table."""

    def side(fk: Any) -> str:
        key = singular(trim_suffixes(fk.column))
        prefix = title_case(key) if key != singular(fk.foreign_table) else ""
        return prefix + title_case(plural(fk.foreign_table))

    return side(lhs), side(rhs)


_PRIMITIVES = frozenset(
    {
        "int", "int8", "int16", "int32", "int64",
        "uint", "uint8", "uint16", "uint32", "uint64",
        "float32", "float64",
        "byte", "rune", "string",
    }
)

_NULL_PRIMITIVES = frozenset(
    {
        "null.Int", "null.Int8", "null.Int16", "null.Int32", "null.Int64",
        "null.Uint", "null.Uint8", "null.Uint16", "null.Uint32", "null.Uint64",
        "null.Float32", "null.Float64",
        "null.Byte", "null.String",
    }
)


def is_primitive(typ: str) -> bool:
    """Tell whether ``typ`` is a primitive type that compares with ``==``."""
    return typ in _PRIMITIVES


def is_null_primitive(typ: str) -> bool:
    """Tell whether ``typ`` is a nullable wrapper of a primitive type."""
    return typ in _NULL_PRIMITIVES


def convert_null_to_primitive(typ: str) -> str:
    """Map ``null.X`` to its primitive ``x``; other types are returned unchanged."""
    if is_null_primitive(typ):
        return typ.split(".")[1].lower()
    return typ