class ParseError(Exception):
    """Raised when the unified diff grammar cannot be recognized

    Attributes:
        message (str): what was wrong with the input
        block (str): raw text of the offending file block
    """

    def __init__(self, message: str, block: str) -> None:
        super().__init__(message)
        self.message = message
        self.block = block
