import subprocess
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent

MODULES = [
    "karbon.models.tokens",
    "karbon.models.answers",
    "karbon.models.assessment",
    "karbon.models.questions",
    "karbon.models.session",
    "karbon.utils",
    "karbon.utils.factors",
    "karbon.utils.advice",
    "karbon.utils.calculations",
    "karbon.utils.i18n",
    "karbon.config",
    "karbon.ui",
    "karbon.pages",
]


@pytest.mark.parametrize("module", MODULES)
def test_module_imports_on_its_own(module):
    """Each module must import first in a fresh interpreter."""
    completed = subprocess.run(
        [sys.executable, "-c", f"import {module}"],
        cwd=ROOT,
        capture_output=True,
        text=True,
        timeout=120,
    )
    assert completed.returncode == 0, completed.stderr
