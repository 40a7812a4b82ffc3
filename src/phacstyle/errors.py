"""
Exception taxonomy for chart styling.

Every failure of `phac_style(...)` surfaces synchronously as one of these
exceptions. They also subclass the matching builtin (`ValueError`/`KeyError`)
so callers that already guard on builtins keep working.

Keeping the taxonomy centralized avoids ad-hoc exception classes in each
module and makes failures easy to match in tests.
"""

# ==================================================================================================
#                                   TYPES
# ==================================================================================================


class StyleError(Exception):
    """Base class for all styling failures."""


class UnresolvableAxisMappingError(StyleError, ValueError):
    """
    The x-axis variable of the chart's first layer could not be resolved.

    Raised when the chart has no layers, when the first layer has no `x`
    aesthetic (own or inherited), or when the mapped name is not a column of
    the data frame the layer draws from.

    Usage example
    -------------
        try:
            phac_style(g)
        except UnresolvableAxisMappingError as exc:
            print(f"cannot style chart: {exc}")
    """


class InvalidColorTypeError(StyleError, ValueError):
    """The requested colour type is neither discrete nor continuous."""


class UnknownPaletteError(StyleError, KeyError):
    """
    The palette name is not known to the CARTOColors provider.

    `KeyError` quotes its message when printed, so `__str__` is overridden to
    keep the text readable.
    """

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
