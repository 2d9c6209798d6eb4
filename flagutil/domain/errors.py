class FlagValueError(ValueError):
    """Raised when a raw flag string fails validation.

    - `input` is the offending raw string (for lists, the failing substring)
    - `detail` is the human-readable reason from the underlying check
    """

    def __init__(self, input: str, detail: str):
        super().__init__(input, detail)
        self.input = input
        self.detail = detail

    def __str__(self) -> str:
        return f"{self.input}: {self.detail}"


class InvalidAddressError(FlagValueError):
    """host:port の形式になっていない場合の例外"""

    def __str__(self) -> str:
        return f"address {self.input}: {self.detail}"


class InvalidURLError(FlagValueError):
    """URLとして解析できない場合の例外"""

    def __str__(self) -> str:
        return f'parse "{self.input}": {self.detail}'


class InvalidDurationError(FlagValueError):
    """期間として解析できない場合の例外"""

    def __str__(self) -> str:
        return f'duration "{self.input}": {self.detail}'
