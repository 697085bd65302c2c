import sys
from enum import Enum, auto
from typing import Any, Final, Literal, TextIO, overload
from prompt_toolkit.formatted_text import AnyFormattedText, to_plain_text
from .exceptions import IoError, ParseError, ReadError
from .parsing import get_parser, zero_value


# closed streams raise ValueError, undecodable input raises UnicodeDecodeError (a ValueError)
_STREAM_FAILURES: Final = (OSError, ValueError)


class _Missing(Enum):
    MISSING = auto()


MISSING: Final = _Missing.MISSING


def _prompt_text(prompt: AnyFormattedText) -> str:
    # plain strings are written verbatim, formatted text is flattened
    if isinstance(prompt, str):
        return prompt
    return to_plain_text(prompt)


def _write_prompt(text: str, stdout: TextIO | None) -> None:
    stream = stdout if stdout is not None else sys.stdout
    if stream is None:
        raise IoError(OSError("standard output is not available"))

    try:
        stream.write(text)
        stream.flush()
    except _STREAM_FAILURES as e:
        raise IoError(e) from e


def _read_line(stdin: TextIO | None) -> str:
    stream = stdin if stdin is not None else sys.stdin
    if stream is None:
        raise IoError(OSError("standard input is not available"))

    try:
        return stream.readline()
    except _STREAM_FAILURES as e:
        raise IoError(e) from e


@overload
def read(
    prompt: AnyFormattedText = "",
    /,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> str: ...


@overload
def read[T](
    prompt: AnyFormattedText,
    target: type[T],
    /,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> T: ...


def read(
    prompt: AnyFormattedText = "",
    target: Any = str,  # pyright: ignore[reportAny]
    /,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> Any:  # pyright: ignore[reportAny]
    """
    Print a prompt, read one line from standard input and parse it into the target type.

    The prompt is written without a trailing newline and flushed before blocking on input.
    An empty prompt writes nothing at all. Leading and trailing whitespace, including the
    line ending, is stripped before parsing.

    Basic usage:
        >>> count = read("Enter count: ", int)
        >>> ratio = read("Enter ratio: ", float)
        >>> name = read("Enter name: ")

    Args:
        prompt: Text to show before reading. Also accepts prompt_toolkit formatted text,
         which is written as plain text
        target: The type to parse into, str by default. See tinyinput.parsing.get_parser
        stdin: Stream to read from instead of sys.stdin
        stdout: Stream to write the prompt to instead of sys.stdout

    Returns:
        The parsed value.

    Raises:
        IoError: if writing the prompt or reading the line fails
        ParseError: if the line does not match the target type's format. End of input
         reads as an empty line, so it surfaces here for types that reject empty text
        UnparsableTypeException: if the target type cannot be parsed from text at all,
         raised before anything is written or read
    """
    parser = get_parser(target)

    text = _prompt_text(prompt)
    if text:
        _write_prompt(text, stdout)

    line = _read_line(stdin).strip()

    try:
        return parser(line)  # pyright: ignore[reportAny]
    except Exception as e:
        raise ParseError() from e


def read_or_default[T](
    prompt: AnyFormattedText,
    target: type[T],
    /,
    default: T | Literal[_Missing.MISSING] = MISSING,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> T:
    """
    Like read, but return a default value instead of raising ReadError.

    Args:
        prompt: Text to show before reading
        target: The type to parse into
        default: Value returned when reading or parsing fails. Defaults to the type's
         zero value, e.g. 0 for int, "" for str or None for optional types

    Raises:
        UnparsableTypeException: if the target type cannot be parsed from text, or no
         default was given and the type has no zero value
    """
    fallback = zero_value(target) if default is MISSING else default

    try:
        return read(prompt, target, stdin=stdin, stdout=stdout)
    except ReadError:
        return fallback
