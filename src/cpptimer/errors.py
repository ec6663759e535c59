"""Exceptions raised by cpptimer."""


class CppTimerError(Exception):
    """Base exception for cpptimer errors."""


class ConfigError(CppTimerError):
    """Raised when .cpp-timer.toml cannot be parsed or validated."""


class BuildError(CppTimerError):
    """Raised when a build command cannot be executed."""


class RecordAlreadyCompiledError(CppTimerError):
    """Raised when a completed timing record is marked compiled again."""
