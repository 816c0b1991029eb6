"""Exception hierarchy for parse-time and edit-time failures.

Parsing is all-or-nothing: every failure surfaces as one ``ParseError``
subclass and no partial model is returned.  Edits fail individually with an
``EditError`` subclass and leave the model and its history untouched.
"""


class TableError(Exception):
    """Root of every error raised by tablekit."""


# ─── Parse Errors ─────────────────────────────────────────────────────────────


class ParseError(TableError, ValueError):
    pass


class EmptyInputError(ParseError):
    pass


class FormatNotRecognizedError(ParseError):
    pass


class MalformedTableError(ParseError):
    pass


class ColumnCountMismatchError(ParseError):
    pass


class HtmlParseError(ParseError):
    """Failure while reading an HTML table; *cause* holds the inner error, if any."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(f"Error parsing HTML table: {message}")
        self.cause = cause


class NoTableFoundError(HtmlParseError):
    pass


class NoHeaderRowError(HtmlParseError):
    pass


class NoHeadersFoundError(HtmlParseError):
    pass


# ─── Edit Errors ──────────────────────────────────────────────────────────────


class EditError(TableError):
    pass


class NoColumnsDefinedError(EditError):
    pass


class CannotRemoveLastColumnError(EditError):
    pass


class InvalidIndexError(EditError, IndexError):
    pass


class NoRowsToRemoveError(EditError):
    pass


class InsufficientRowsError(EditError):
    pass
