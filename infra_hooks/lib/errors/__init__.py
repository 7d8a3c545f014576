class HooksException(Exception):
    """Base class for errors raised while building hooks"""


class ConfigurationError(HooksException):
    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class InvalidNameError(HooksException):
    def __init__(self, role: str, value: str):
        super().__init__(f"Derived name for `{role}` is empty or malformed (from `{value}`)")
        self.role = role
        self.value = value
