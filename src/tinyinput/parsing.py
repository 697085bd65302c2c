from collections.abc import Callable, Sequence
from enum import Enum
from types import NoneType, UnionType
from typing import (
    Any,
    Final,
    Literal,
    Protocol,
    Self,
    Union,
    get_args,
    get_origin,
    runtime_checkable,
)
from .exceptions import InvalidTextException, UnparsableTypeException


type Parser[T] = Callable[[str], T]

_UNPARSABLE: Final[frozenset[Any]] = frozenset(
    {object, Any, NoneType, tuple, set, frozenset, dict}
)


@runtime_checkable
class TextParsable(Protocol):
    """
    Capability of a type that can be built from a line of text.

    Implementers raise ValueError when the text does not match their format:
        >>> class Point:
        ...     def __init__(self, x: int, y: int) -> None:
        ...         self.x, self.y = x, y
        ...
        ...     @classmethod
        ...     def from_text(cls, text: str) -> "Point":
        ...         x, y = text.split(",")
        ...         return cls(int(x), int(y))
    """

    @classmethod
    def from_text(cls, text: str, /) -> Self: ...


def format_type(target: Any) -> str:  # pyright: ignore[reportAny]
    """Human-readable name of a type, e.g. 'int' or 'list[int] | None'."""
    if isinstance(target, type) and get_origin(target) is None:
        return target.__name__

    type_str = str(target)  # pyright: ignore[reportAny]
    patterns_to_remove = ["typing.", "class '", "'", "<", ">"]
    for pattern in patterns_to_remove:
        type_str = type_str.replace(pattern, "")

    return type_str


def _parse_bool(text: str) -> bool:
    # exact spelling only, "True" and "1" are rejected
    if text not in ("true", "false"):
        raise ValueError(f"Invalid boolean literal: {text!r}")
    return text == "true"


def _parse_bytes(text: str) -> bytes:
    return text.encode("utf-8")


def _parse_bytearray(text: str) -> bytearray:
    return bytearray(text, "utf-8")


_BUILTIN_PARSERS: Final[dict[type, Parser[Any]]] = {
    str: str,
    int: int,
    float: float,
    bool: _parse_bool,
    bytes: _parse_bytes,
    bytearray: _parse_bytearray,
}


def _enum_parser[E: Enum](target: type[E]) -> Parser[E]:
    def parse(text: str) -> E:
        return target[text]

    return parse


def _literal_parser(values: Sequence[Any]) -> Parser[Any]:
    def parse(text: str) -> Any:  # pyright: ignore[reportAny]
        # ignore Any since literal values can be of any type and that is fine
        for value in values:  # pyright: ignore[reportAny]
            if isinstance(value, Enum):
                if value.name == text:
                    return value
            elif str(value) == text:  # pyright: ignore[reportAny]
                return value  # pyright: ignore[reportAny]
            # also try case-insensitive comparison for string literals
            if isinstance(value, str) and value.lower() == text.lower():
                return value

        options = [
            v.name if isinstance(v, Enum) else str(v)  # pyright: ignore[reportAny]
            for v in values  # pyright: ignore[reportAny]
        ]
        raise ValueError(f"Expected one of: {', '.join(options)}")

    return parse


def _list_parser[T](item_parser: Parser[T]) -> Parser[list[T]]:
    def parse(text: str) -> list[T]:
        if not text:
            return []
        return [item_parser(item.strip()) for item in text.split(",")]

    return parse


def _union_parser(members: Sequence[Any]) -> Parser[Any]:
    optional = NoneType in members
    parsers = [get_parser(m) for m in members if m is not NoneType]  # pyright: ignore[reportAny]

    def parse(text: str) -> Any:  # pyright: ignore[reportAny]
        if optional and text.lower() in ("", "none"):
            return None

        # try each member in declaration order until one works
        last_exception: Exception | None = None
        for parser in parsers:
            try:
                return parser(text)  # pyright: ignore[reportAny]
            except Exception as e:
                last_exception = e

        raise ValueError(f"No union member accepted {text!r}") from last_exception

    return parse


def get_parser(target: Any) -> Parser[Any]:  # pyright: ignore[reportAny]
    """
    Resolve the canonical text-parsing rule of a type.

    Args:
        target: The type to parse into, e.g. int, list[float], Color or Literal["y", "n"]

    Returns:
        A callable taking the trimmed text and returning the parsed value.
        Any exception it raises means the text is malformed.

    Raises:
        UnparsableTypeException: if there is no way to parse text into the type
    """
    origin = get_origin(target)  # pyright: ignore[reportAny]

    if origin is Literal:
        return _literal_parser(get_args(target))

    if origin is Union or origin is UnionType:
        return _union_parser(get_args(target))

    if origin is list:
        type_args = get_args(target)
        item_type = type_args[0] if type_args else str  # pyright: ignore[reportAny]
        return _list_parser(get_parser(item_type))

    if origin is not None or not isinstance(target, type) or target in _UNPARSABLE:
        raise UnparsableTypeException(
            f"Cannot parse text into {format_type(target)}"
        )

    # explicit opt-in wins over every built-in rule
    if issubclass(target, TextParsable):
        return target.from_text

    if target in _BUILTIN_PARSERS:
        return _BUILTIN_PARSERS[target]

    if issubclass(target, Enum):
        return _enum_parser(target)

    if target is list:
        return _list_parser(str)

    # any other class is expected to accept its text form in the constructor
    return target


def parse_text[T](target: type[T], text: str) -> T:
    """
    Parse text into the target type.

    Raises:
        UnparsableTypeException: if the type cannot be parsed from text
        InvalidTextException: if the text does not match the type's format
    """
    parser = get_parser(target)
    try:
        return parser(text)
    except Exception as e:
        raise InvalidTextException(
            f"Could not interpret {text!r} as type {format_type(target)}"
        ) from e


def zero_value[T](target: type[T]) -> T:
    """
    Default value of a type: 0, 0.0, "", False, b"", [] or None for optional types.
    Other classes are called without arguments.

    Raises:
        UnparsableTypeException: if the type has no default value
    """
    origin = get_origin(target)

    if (origin is Union or origin is UnionType) and NoneType in get_args(target):
        return None  # pyright: ignore[reportReturnType]

    if origin is list or target is list:
        return []  # pyright: ignore[reportReturnType]

    if origin is None and isinstance(target, type) and target not in _UNPARSABLE:
        try:
            return target()
        except TypeError as e:
            raise UnparsableTypeException(
                f"Type {format_type(target)} has no default value"
            ) from e

    raise UnparsableTypeException(f"Type {format_type(target)} has no default value")
