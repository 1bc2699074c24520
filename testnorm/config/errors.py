"""Configuration exceptions."""


class ConfigError(Exception):
    """Raised when a config file cannot be read or its settings are invalid.

    ``errors`` holds one ``{"loc", "msg", "type"}`` dict per invalid setting
    and is empty when the file itself could not be read or parsed.
    """

    def __init__(
        self, message: str, path: str | None = None, errors: list[dict] | None = None
    ):
        self.path = path
        self.errors = errors or []
        super().__init__(message)
