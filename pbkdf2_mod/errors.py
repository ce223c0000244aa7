from __future__ import annotations


class HarnessError(Exception):
    """Base class for every error that aborts a run. Carries the process exit code."""

    exit_code: int = 2


class ArgumentCountError(HarnessError):
    exit_code = 1

    def __init__(self) -> None:
        super().__init__("Not enough arguments")


class ArgumentFormatError(HarnessError, ValueError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'"{name}" is not an integer')


class ArgumentRangeError(HarnessError, ValueError):
    def __init__(self, name: str, bound: int, kind: str) -> None:
        if kind not in ("minimum", "maximum"):
            raise ValueError(f"Unknown bound kind: {kind}")
        self.name = name
        self.bound = bound
        self.kind = kind
        relation = "smaller" if kind == "minimum" else "larger"
        super().__init__(f'"{name}" is {relation} than {kind} value of {bound}')


class InvalidHexCharacter(HarnessError, ValueError):
    def __init__(self, position: int, char: str, text: str) -> None:
        self.position = position  # 1-based
        self.char = char
        self.text = text
        super().__init__(f"Invalid hex character '{char}' at position {position} of hex string \"{text}\"")


class ConfigError(HarnessError, ValueError):
    pass


class AllocationFailure(HarnessError):
    exit_code = 3

    def __init__(self, size_requested: int, purpose: str) -> None:
        self.size_requested = size_requested
        self.purpose = purpose
        super().__init__(f"Could not allocate {size_requested} bytes for {purpose}")


class EncodingConversionError(HarnessError):
    exit_code = 3

    def __init__(self, purpose: str, reason: str = "") -> None:
        self.purpose = purpose
        self.reason = reason
        msg = f"Could not convert {purpose}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class ProviderError(HarnessError):
    def __init__(self, code: str, operation: str) -> None:
        self.code = code
        self.operation = operation
        super().__init__(f"Error {code} returned by {operation}")


class ProviderUnavailable(ProviderError):
    pass


class AlgorithmUnsupported(ProviderError):
    pass
