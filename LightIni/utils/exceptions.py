class IniError(RuntimeError):
    """Raised when parsing an INI source stops on its first error."""


class IniConfigurationError(IniError):
    """Raised for an unusable parser configuration, e.g. a bad comment prefix."""


class IniSyntaxError(IniError):
    """Raised when a line is neither a comment, a section, an option nor blank."""

    def __init__(self, line_number: int, line: str, reason: str = "invalid line"):
        super().__init__(f"line {line_number}: {reason}: {line!r}")
        self.line_number = line_number
        self.line = line
        self.reason = reason


class IniHandlerError(IniError):
    """Raised when the handler rejects a section, an option or a comment."""

    def __init__(self, error: BaseException, line_number: int):
        super().__init__(f"line {line_number}: {error}")
        self.error = error
        self.line_number = line_number


class IniIOError(IniError):
    """Raised when the input source can't be opened, read or decoded."""

    def __init__(self, error: BaseException):
        super().__init__(str(error))
        self.error = error


class DuplicateSectionError(RuntimeError):
    """Raised by INIReader when a section name appears twice."""

    def __init__(self, name: str):
        super().__init__(f"{name}: duplicate section")
        self.name = name
