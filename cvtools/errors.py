"""
Exception types used throughout the package.
"""


class CvToolsError(Exception):
    """Base exception for all cvtools errors."""


class ArgumentError(CvToolsError):
    """Exception for missing or malformed command line arguments."""


class UnitConversionError(CvToolsError):
    """Generic exception for unit conversion errors."""


class CategoryUnknownError(UnitConversionError):
    """One or both units are not found in any unit table."""


class IncompatibleCategoriesError(UnitConversionError):
    """Both units are known but belong to different categories."""


class UnhandledCategoryError(UnitConversionError):
    """A category has no conversion strategy. Should never be raised."""
