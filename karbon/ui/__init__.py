"""UI components module."""

from .styling import UIStyles
from .sidebar import Sidebar
from .header import Header
