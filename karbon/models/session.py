"""Wizard session state.

Every transition returns a new session; the Streamlit layer swaps the
object held in ``st.session_state`` instead of mutating it in place.
"""

import logging
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..utils.calculations import FootprintCalculator, get_calculator
from .answers import SurveyAnswers
from .assessment import FootprintResult
from .questions import Step

logger = logging.getLogger(__name__)


class WizardSession(BaseModel):
    """Current step, collected answers and (once computed) the result."""
    model_config = ConfigDict(frozen=True)

    variant: str
    step: int = 0
    answers: SurveyAnswers
    result: Optional[FootprintResult] = None

    @classmethod
    def start(cls, variant: str) -> "WizardSession":
        calculator = get_calculator(variant)
        return cls(variant=variant, answers=calculator.empty_answers())

    @property
    def calculator(self) -> FootprintCalculator:
        return get_calculator(self.variant)

    @property
    def step_count(self) -> int:
        return len(self.calculator.steps)

    @property
    def current_step(self) -> Step:
        return self.calculator.steps[self.step]

    @property
    def is_first_step(self) -> bool:
        return self.step == 0

    @property
    def is_results_step(self) -> bool:
        return self.step == self.step_count - 1

    @property
    def is_last_input_step(self) -> bool:
        return self.step == self.step_count - 2

    def with_answer(self, section: str, field: str, value: Any) -> "WizardSession":
        return self.model_copy(
            update={"answers": self.answers.with_answer(section, field, value)}
        )

    def next_step(self) -> "WizardSession":
        """Advance one step; entering the results step computes the footprint."""
        if self.is_results_step:
            return self
        update = {"step": self.step + 1}
        if self.is_last_input_step:
            update["result"] = self.calculator.compute(self.answers)
            logger.info(f"Footprint computed ({self.variant}): {update['result'].total_kg} kg")
        return self.model_copy(update=update)

    def prev_step(self) -> "WizardSession":
        if self.is_first_step:
            return self
        return self.model_copy(update={"step": self.step - 1})

    def reset(self) -> "WizardSession":
        """Back to step 0 with empty answers and no result."""
        return WizardSession.start(self.variant)

    def switch_variant(self, variant: str) -> "WizardSession":
        if variant == self.variant:
            return self
        return WizardSession.start(variant)
