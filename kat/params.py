"""Per-language highlighting rules selected by file extension."""

from __future__ import annotations

from dataclasses import dataclass

_IDENT_CALL = r"\b([a-zA-Z_][a-zA-Z0-9_]*)\s*\("
_TYPED_CALL = r"\b([a-zA-Z_][a-zA-Z0-9_]*)\s+([a-zA-Z_][a-zA-Z0-9_]*)\s*\("
_STR_NEWLINE = r"\\n"
_LITERAL_STR = r'".*?"'
_ARGS_FN = r"\b([a-zA-Z_][a-zA-Z0-9_]*)\s*(?=\,|\))"
_HEADER_AND_URL = r"<[^>]+>"

# A pattern that practically never occurs in source text; used to disable a rule.
_NEVER = "@@@@"


def _words(text: str) -> tuple[str, ...]:
    """Split a whitespace-separated word list, keeping order and duplicates."""
    return tuple(text.split())


def _both_cases(*names: str) -> tuple[str, ...]:
    """Each name in upper case followed by the same name in lower case."""
    return tuple(form for name in names for form in (name.upper(), name.lower()))


@dataclass(frozen=True)
class LanguageParams:
    """Keyword lists and patterns used to colour one language.

    ``multicom1`` and ``multicom2`` are plain substrings that open and close a
    multi-line comment; every other pattern is a regular expression.
    Keyword lists keep their order, duplicates included, because each
    entry is applied as a separate substitution.
    """

    special: tuple[str, ...]
    keywords: tuple[str, ...]
    comment: str
    multicom1: str
    multicom2: str
    fn1: str = _IDENT_CALL
    fn2: str = _TYPED_CALL
    str_newline: str = _STR_NEWLINE
    literal_str: str = _LITERAL_STR
    args_fn: str = _ARGS_FN
    header_and_url: str = _HEADER_AND_URL


C_CPP = LanguageParams(
    special=_words(
        """
        #include #define return register if else inline class #pragma using
        decltype new delete typedef class static using switch case throw catch
        try for while constexpr consteval unsigned friend #if #elif #ifdef
        #ifndef #define
        """
    ),
    keywords=_words(
        """
        int char double float void printf auto const public private protected
        static namespace short extends this enum double do break continue byte
        boolean assert long enum do break continue virtual bool sizeof stuct
        reinterpret_cas static_cast
        """
    ),
    comment="//.*",
    multicom1="/*",
    multicom2="*/",
)

JAVA = LanguageParams(
    special=_words(
        """
        import transient synchronized volatile if else abstract class static
        using switch case throw interface catch try for while
        """
    ),
    keywords=_words(
        """
        int char void printf String final public private protected float long
        new return short extends this enum double do break continue byte
        boolean assert
        """
    ),
    comment="//.*",
    multicom1="/*",
    multicom2="*/",
)

PLAIN_TEXT = LanguageParams(
    special=(),
    keywords=(),
    comment=_NEVER,
    multicom1=_NEVER,
    multicom2=_NEVER,
    fn1=_NEVER,
    fn2=_NEVER,
    str_newline=_NEVER,
    literal_str=_NEVER,
    args_fn=_NEVER,
    header_and_url=_NEVER,
)

PYTHON = LanguageParams(
    special=_words(
        """
        import def synchronized volatile if else elif class lambda True False
        in with del from for while
        """
    ),
    keywords=_words("do break continue byte boolean assert as"),
    comment="#.*",
    multicom1='"""',
    multicom2='"""',
)

JAVASCRIPT = LanguageParams(
    special=_words(
        """
        import instanceof eval export if else let class static using switch
        case throw interface catch try for while
        """
    ),
    keywords=_words(
        """
        int char void function final public private protected float long new
        return short extends this enum double do break continue byte typeof
        with
        """
    ),
    comment="//.*",
    multicom1="/*",
    multicom2="*/",
)

C_SHARP = LanguageParams(
    special=_words(
        """
        using base explicit volatile if else as class static using switch case
        throw interface catch try for while abstract
        """
    ),
    keywords=_words(
        """
        int char void typeof string const public var private protected float
        long new return short namespace this enum double do break continue
        byte bool assert
        """
    ),
    comment="//.*",
    multicom1="/*",
    multicom2="*/",
)

GO = LanguageParams(
    special=_words(
        """
        package fmt default map if else import struct select switch case
        interface chan type for while var
        """
    ),
    keywords=_words(
        """
        int char void printf string const public float return short func rune
        enum double do break continue byte bool goto
        """
    ),
    comment="//.*",
    multicom1="#",
    multicom2="$",
)

BASH = LanguageParams(
    special=_words(
        "source if else elif fi case esac echo select until for time while"
    ),
    keywords=_words("printf return do break continue declare shift readonly"),
    comment="#.*$",
    multicom1="#!",
    multicom2=" ",
)

SWIFT = LanguageParams(
    special=_words(
        """
        class struct enum protocol if else typealias associatedtype import
        switch case let init deinit for while var is as
        """
    ),
    keywords=_words(
        """
        Int Character throws print String final public Float return async await
        func catch super Double do break continue try Bool default private
        """
    ),
    comment="//.*",
    multicom1="#",
    multicom2="$",
)

RUST = LanguageParams(
    special=_words(
        """
        impl struct enum pub if else typealias fn import switch case let init
        deinit for while var is as
        """
    ),
    keywords=_words(
        """
        int char mut println string final public float return async await func
        catch super double do break continue try bool default private const
        """
    ),
    comment="//.*",
    multicom1="#",
    multicom2="$",
)

MY = LanguageParams(
    special=_words("class fun return if else while for"),
    keywords=_words("var print"),
    comment="//.*",
    multicom1="@@@@",
    multicom2="@@@@@",
)

SQL = LanguageParams(
    special=_both_cases(
        "join", "select", "from", "where",
        "inner join", "left join", "right join", "full join",
        "cross join", "natural join", "group by", "order by",
        "having", "limit", "count", "sum", "avg", "min", "max", "now",
        "upper", "lower", "length", "desc", "asc", "in",
    ),
    keywords=_both_cases(
        "begin", "commit", "rollback", "savepoint", "release",
        "set transaction", "and", "or", "not", "like", "between", "is", "null",
    ),
    comment="--.*",
    multicom1="/*",
    multicom2="*/",
    fn1=_NEVER,
    fn2=_NEVER,
    args_fn=_NEVER,
    header_and_url=_NEVER,
)

# JavaScript, TypeScript and C# files are coloured with the Python rules.
_BY_EXTENSION: dict[str, LanguageParams] = {
    **dict.fromkeys(("c", "cpp", "hpp", "h", "ter"), C_CPP),
    "java": JAVA,
    **dict.fromkeys(("py", "js", "ts", "cs"), PYTHON),
    "go": GO,
    **dict.fromkeys(("sh", "bash"), BASH),
    "swift": SWIFT,
    "rs": RUST,
    "my": MY,
    "sql": SQL,
}


def params_for(filetype: str) -> LanguageParams:
    """Return the rules for a file extension (without the dot).

    Unknown extensions get rules that highlight nothing.
    """
    return _BY_EXTENSION.get(filetype, PLAIN_TEXT)