class ParserError(Exception):
    """Base for everything the page parser raises on purpose."""


class FatalInputError(ParserError):
    """The input file could not be read or held no usable pages."""


class PageSkipped(ParserError):
    """One page cannot be turned into output. The batch carries on."""


class LineParseError(ParserError):
    def __init__(self, lineno, reason):
        self.lineno = lineno
        self.reason = reason
        super().__init__("Failed to parse line %s: %s" % (lineno, reason))
