"""Exception types raised while generating an assets map."""


class AssetsMapperError(Exception):
    """Base class for all assets-mapper failures."""


class InvalidInputError(AssetsMapperError, ValueError):
    """Raised for malformed options, arguments or names."""


class SourceNotFoundError(AssetsMapperError):
    """Raised when the source directory does not exist."""


class SourceNotDirectoryError(AssetsMapperError):
    """Raised when the source path exists but is not a directory."""


class ReadError(AssetsMapperError):
    """Raised when a directory cannot be listed.

    The scanner recovers from it by skipping the directory.
    """


class WriteError(AssetsMapperError):
    """Raised when the generated module cannot be written."""


class WatchError(AssetsMapperError):
    """Raised when a watch session cannot be started."""
