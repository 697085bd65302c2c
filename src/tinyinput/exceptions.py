class TinyInputException(Exception):
    """
    Base exception for all tinyinput exceptions.
    """

    pass


class ReadError(TinyInputException):
    """
    Base class for errors raised while reading or parsing user input.
    Catch this to handle both the I/O and the parse case.
    """

    pass


class IoError(ReadError):
    """
    Raised when writing the prompt or reading from standard input fails.
    The failure from the I/O layer is kept in `error`.
    """

    error: Exception

    def __init__(self, error: Exception) -> None:
        super().__init__(error)
        self.error = error

    def __str__(self) -> str:
        return f"I/O error while reading input: {self.error}"


class ParseError(ReadError, ValueError):
    """
    Raised when the input line was read but could not be parsed into the requested type.
    """

    def __init__(self) -> None:
        super().__init__()

    def __str__(self) -> str:
        return "input could not be parsed"


class ParsingException(TinyInputException):
    """
    Base class for text parsing errors.
    """

    pass


class InvalidTextException(ParsingException, ValueError):
    """
    Raised when text does not match the grammar of the target type.
    """

    pass


class UnparsableTypeException(ParsingException, TypeError):
    """
    Raised when a type has no known way to be parsed from text.
    """

    pass
