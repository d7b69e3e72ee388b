"""Custom exceptions for the blocklist compiler."""


class BlocklistError(Exception):
    """Base class for blocklist exceptions with a process exit code.

    All custom exceptions should inherit from this class so the command line
    front-end can report them uniformly and exit with ``exit_code``.
    """
    exit_code: int = 1

    def __init__(self, message: str = "Blocklist error"):
        self.message = message
        super().__init__(message)


class SyntaxCheckError(BlocklistError):
    """Raised when an entry source cannot be turned into an entry list."""


class DeserializeError(SyntaxCheckError):
    """Raised when the source text is not a well-formed entry list."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"JSON Deserialize error: {detail}")


class SourceIOError(SyntaxCheckError):
    """Raised when the entry source cannot be read."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"I/O error: {detail}")


class CompileError(BlocklistError):
    """Base class for failures while compiling an entry list."""


class UnsupportedFeatureSetError(CompileError):
    """Raised when the requested feature flags cannot be emitted for the target.

    Example: ``GoogleSearchPrefix`` relies on the ``^=`` attribute operator
    and is therefore only available for uBlock Origin.
    """

    def __init__(self, message: str = "Unsupported feature combination"):
        super().__init__(message)


class ConflictingFeatureSetError(UnsupportedFeatureSetError):
    """Raised when mutually exclusive feature flags are requested together."""

    def __init__(self, first: str, second: str):
        self.first = first
        self.second = second
        super().__init__(
            f"Unsupported feature combination: {first} and {second} "
            "must not be used in same time. Please separate call."
        )


class UnsupportedMatchMethodError(CompileError):
    """Raised when a dialect has no template for an entry's match method."""

    def __init__(self, target: str, kind: str, match_method: str):
        self.target = target
        self.kind = kind
        self.match_method = match_method
        super().__init__(
            f"Unsupported match method '{match_method}' for {kind} entries "
            f"on target {target}"
        )


class CompileSyntaxError(CompileError):
    """Raised when the source of a compile run fails the syntax check."""

    def __init__(self, cause: SyntaxCheckError):
        self.cause = cause
        super().__init__(f"Syntax error: {cause.message}")


class OutputIOError(CompileError):
    """Raised when the compiled output cannot be written."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"I/O error: {detail}")
