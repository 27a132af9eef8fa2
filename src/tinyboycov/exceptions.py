class TinyBoyCovException(Exception):
    pass


class ConfigurationError(TinyBoyCovException, ValueError):
    def __init__(self, field: str, message: str):
        super().__init__(f"invalid {field}: {message}")
        self.field = field
