"""Exception types raised during startup.

Handler failures (reply / react / DM delivery) are not wrapped: they surface as
the framework's own exceptions and are logged by the caller.
"""


class HbotError(Exception):
    pass


class SetupError(HbotError):
    """Fatal: the bot cannot start."""


class MissingTokenError(SetupError):
    def __init__(self, name: str):
        super().__init__(f"Expected a token in the environment ({name})")
        self.name = name


class ConfigError(SetupError):
    pass


__all__ = ["HbotError", "SetupError", "MissingTokenError", "ConfigError"]
