"""Custom exceptions for CLI"""


class CLIException(Exception):
    """Base exception for CLI errors"""
    pass


class InvalidDatasetIdError(CLIException):
    """Dataset ids given on the command line are not numeric"""

    def __init__(self, ids):
        super().__init__(f"Dataset ids must be numeric: {', '.join(ids)}")
        self.ids = list(ids)


class DatasetNotFoundError(CLIException):
    """None of the requested datasets is in the catalog"""

    def __init__(self, ids):
        super().__init__(f"No dataset found for ids: {', '.join(ids)}")
        self.ids = list(ids)


class UnknownMountError(CLIException):
    """No mount is backed by the named volume"""

    def __init__(self, volume_name, reason=None):
        message = f"Mount '{volume_name}' not found"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
        self.volume_name = volume_name


class ConfigurationError(CLIException):
    """The configuration file cannot be used"""

    def __init__(self, config_file, reason):
        super().__init__(f"Configuration file {config_file} {reason}")
        self.config_file = config_file
