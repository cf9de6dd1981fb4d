"""
Error Hierarchy

Exceptions raised outside the core processing stages. Parsing,
classification and curation never raise for malformed model text; the
errors below cover configuration, image input and export problems.
Provider failures live in ``stockmeta.llm.errors``.
"""


class StockMetaError(Exception):
    """Base exception for all stockmeta errors."""
    pass


class ConfigurationError(StockMetaError):
    """Configuration is invalid, missing required fields, or conflicting.

    Raised when a YAML configuration file cannot be parsed or contains
    values outside their allowed range.
    """
    pass


class ImageInputError(StockMetaError):
    """An image could not be read or has an unsupported type.

    Attributes:
        path: Path of the offending image, when known
    """

    def __init__(self, message: str, path: str = None):
        super().__init__(message)
        self.path = path


class ExportError(StockMetaError):
    """Results could not be written to the requested destination."""
    pass
