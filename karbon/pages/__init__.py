"""Pages module for different application views."""

from .hero_page import HeroPage
from .calculator_page import CalculatorPage
from .results_page import ResultsPage
