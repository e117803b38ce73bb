class IniHandler:
    """Receives the constructs recognized by IniParser, one call per line, in order.

    Raise any exception from a method to reject the construct; the parser stops
    and reports it as an IniHandlerError. section() and option() must be
    overridden, comment() is ignored unless overridden.
    """

    def section(self, name: str) -> None:
        raise NotImplementedError

    def option(self, key: str, value: str) -> None:
        raise NotImplementedError

    def comment(self, text: str) -> None:
        pass
