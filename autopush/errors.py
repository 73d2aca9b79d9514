class AutoPushError(Exception):
    pass


class ConfigError(AutoPushError):
    pass


class MissingCredentialError(ConfigError):
    def __init__(self, variable: str) -> None:
        super().__init__(f"{variable} is not set")
        self.variable = variable


class GenerationError(AutoPushError):
    """The text generation service could not produce a response."""
