"""Custom exceptions for dirsum.

Library code raises these; the CLI turns them into an ``error:`` line on
stderr and a non-zero exit code.
"""


class DirsumError(RuntimeError):
    """Base class for all dirsum errors."""
    pass


class PathUnreadableError(DirsumError):
    """Root or a descendant could not be listed, opened or read."""

    def __init__(self, path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Cannot read '{self.path}': {reason}")


class UnsupportedAlgorithmError(DirsumError):
    """Requested digest name is not known to hashlib."""

    def __init__(self, algorithm: str):
        self.algorithm = algorithm
        super().__init__(
            f"Unsupported digest algorithm '{algorithm}'. "
            f"Try one of: md5, sha1, sha256, sha512, blake2b "
            f"(run 'dirsum algorithms' for the full list)."
        )


class ConfigError(DirsumError):
    """Configuration file is missing, malformed or invalid."""
    pass
