"""Exceptions raised by humansize."""


class HumanSizeError(ValueError):
    """Base class for all humansize errors."""
    pass


class ParseError(HumanSizeError):
    """Raised when a data size expression or unit token cannot be parsed."""
    
    def __init__(self, input: str, reason: str = "unsupported data size format"):
        self.input = input
        self.reason = reason
        super().__init__(f"{reason}: {input!r}")


class FormatError(HumanSizeError):
    """Raised when a byte count cannot be rendered with the unit ladder."""
    
    def __init__(self, size: float, reason: str = "unable to convert"):
        self.size = size
        self.reason = reason
        super().__init__(f"{reason}: {size!r}")
