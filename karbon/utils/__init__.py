"""Utilities module."""

from .calculations import FootprintCalculator, categorize, get_calculator
from .factors import lookup
from .i18n import Translator
