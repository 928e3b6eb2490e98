class ColorParseError(ValueError):
    """
    Raised when text does not match any supported color syntax.

    Attributes:
        text: The rejected input, exactly as given
        reason: The underlying syntax complaint
    """

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Cannot parse color {text!r}: {reason}")
