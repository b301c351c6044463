"""Runtime formatting over Babel CLDR data.

Exports:
    LocaleContext: Immutable, cached locale configuration with currency formatting

Python 3.13+.
"""

from .locale_context import LocaleContext

__all__ = ["LocaleContext"]
