"""Custom exceptions for cascader."""


class CascaderError(Exception):
    """Base exception for cascader operations."""


class ConfigurationError(CascaderError):
    """Invalid cascader configuration."""


class UnknownNodeError(CascaderError):
    """Node or id does not belong to the controller's forest."""


class BulkClearDisabledError(CascaderError):
    """Clearing every selection was requested while bulk clear is disabled."""
