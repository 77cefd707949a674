"""Wizard step and question definitions for both calculator variants.

Each step names the answer section it writes to; the calculator page
renders the questions generically from these definitions.
"""

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .answers import MAX_QUANTITY, extract_number
from .tokens import (
    DailyDiet,
    DailyTransport,
    DietType,
    MeatFrequency,
    RecyclingFrequency,
    WaterUsage,
    YesNo,
)


class QuestionKind(str, Enum):
    SELECT = "select"
    NUMBER = "number"


class Option(BaseModel):
    model_config = ConfigDict(frozen=True)

    token: str
    label: str


class Question(BaseModel):
    """One form field of a step."""
    model_config = ConfigDict(frozen=True)

    field: str
    label: str
    kind: QuestionKind = QuestionKind.SELECT
    placeholder: str = ""
    options: Tuple[Option, ...] = ()
    # Stored value = entered value * entry_scale (monthly → annual is 12)
    entry_scale: float = 1.0
    wide: bool = False

    def stored_value(self, entered: float) -> float:
        return extract_number(entered * self.entry_scale)

    def entered_value(self, stored: float) -> float:
        return stored / self.entry_scale if self.entry_scale else stored

    @property
    def max_entry(self) -> float:
        """Largest value the form accepts before scaling."""
        return MAX_QUANTITY / self.entry_scale if self.entry_scale else MAX_QUANTITY

    def option_label(self, token: str) -> Optional[str]:
        for option in self.options:
            if option.token == token:
                return option.label
        return None


class Step(BaseModel):
    """A wizard step; the results step has no section and no questions."""
    model_config = ConfigDict(frozen=True)

    key: str
    title: str
    description: str
    icon: str
    section: Optional[str] = None
    questions: Tuple[Question, ...] = Field(default_factory=tuple)

    @property
    def is_results(self) -> bool:
        return self.section is None


def _options(*pairs) -> Tuple[Option, ...]:
    return tuple(Option(token=token.value, label=label) for token, label in pairs)


RESULTS_STEP = Step(
    key="results",
    title="Sonuçlar",
    description="Karbon ayak iziniz",
    icon="🧮",
)


HABITS_STEPS: Tuple[Step, ...] = (
    Step(
        key="consumption",
        title="Tüketim Alışkanlıkları",
        description="Beslenme ve kargo alışkanlıklarınız",
        icon="🍽️",
        section="consumption",
        questions=(
            Question(
                field="meat_frequency",
                label="Haftada ne sıklıkla et tüketiyorsunuz?",
                placeholder="Et tüketim sıklığınızı seçin",
                options=_options(
                    (MeatFrequency.DAILY, "Her gün"),
                    (MeatFrequency.FIVE_SIX_DAYS, "Haftada 5-6 gün"),
                    (MeatFrequency.THREE_FOUR_DAYS, "Haftada 3-4 gün"),
                    (MeatFrequency.ONE_TWO_DAYS, "Haftada 1-2 gün"),
                    (MeatFrequency.NEVER, "Hiç tüketmem"),
                ),
            ),
            Question(
                field="daily_diet",
                label="Günlük beslenme alışkanlığınız nasıldır?",
                placeholder="Beslenme tarzınızı seçin",
                options=_options(
                    (DailyDiet.FAST_FOOD, "Çoğunlukla fast food"),
                    (DailyDiet.PROCESSED, "İşlenmiş gıdalar"),
                    (DailyDiet.HOME_COOKED, "Evde yapılan yemekler"),
                    (DailyDiet.ORGANIC, "Organik/yerel gıdalar"),
                ),
            ),
            Question(
                field="monthly_packages",
                label="Ayda kaç kargo alırsınız?",
                kind=QuestionKind.NUMBER,
                wide=True,
            ),
        ),
    ),
    Step(
        key="environment",
        title="Çevre Bilinci",
        description="Geri dönüşüm ve çevre dostu davranışlarınız",
        icon="🌿",
        section="environment",
        questions=(
            Question(
                field="recycling",
                label="Geri dönüşüm yapıyor musunuz?",
                placeholder="Geri dönüşüm durumunuzu seçin",
                options=_options(
                    (YesNo.YES, "Evet, düzenli yapıyorum"),
                    (YesNo.NO, "Hayır, yapmıyorum"),
                ),
            ),
            Question(
                field="renewable_energy",
                label="Yenilenebilir enerji kaynakları kullanıyor musunuz?",
                placeholder="Yenilenebilir enerji kullanımınızı seçin",
                options=_options(
                    (YesNo.YES, "Evet, kullanıyorum"),
                    (YesNo.NO, "Hayır, kullanmıyorum"),
                ),
            ),
            Question(
                field="lights_off",
                label="Odadan çıktığında ışıklarını kapatır mısın?",
                placeholder="Işık kullanım alışkanlığınızı seçin",
                options=_options(
                    (YesNo.YES, "Evet, her zaman kapatırım"),
                    (YesNo.NO, "Hayır, genelde açık bırakırım"),
                ),
            ),
            Question(
                field="tree_planting",
                label="Ağaç dikme etkinliklerine katılır mısın?",
                placeholder="Ağaç dikme etkinliklerine katılımınızı seçin",
                options=_options(
                    (YesNo.YES, "Evet, katılıyorum"),
                    (YesNo.NO, "Hayır, katılmıyorum"),
                ),
            ),
            Question(
                field="water_usage",
                label="Su tüketimini nasıl sağlarsınız?",
                placeholder="Su kullanım alışkanlığınızı seçin",
                wide=True,
                options=_options(
                    (WaterUsage.SAVING, "Tasarruflu kullanırım"),
                    (WaterUsage.NORMAL, "Normal kullanırım"),
                    (WaterUsage.EXCESSIVE, "Fazla kullanırım"),
                ),
            ),
        ),
    ),
    Step(
        key="transportation",
        title="Ulaşım",
        description="Günlük ulaşım tercihleriniz",
        icon="🚗",
        section="transportation",
        questions=(
            Question(
                field="daily_transport",
                label="Günlük ulaşımda hangi araçları kullanıyorsunuz?",
                placeholder="Ana ulaşım aracınızı seçin",
                wide=True,
                options=_options(
                    (DailyTransport.CAR, "Araba"),
                    (DailyTransport.MOTORCYCLE, "Motosiklet"),
                    (DailyTransport.PUBLIC_TRANSPORT, "Toplu Taşıma"),
                    (DailyTransport.BICYCLE, "Bisiklet"),
                    (DailyTransport.WALK, "Yürüyüş"),
                ),
            ),
        ),
    ),
    RESULTS_STEP,
)


USAGE_STEPS: Tuple[Step, ...] = (
    Step(
        key="transportation",
        title="Ulaşım",
        description="Yıllık yolculuklarınız",
        icon="✈️",
        section="transportation",
        questions=(
            Question(
                field="car_km",
                label="Yılda araba ile kaç km yol yapıyorsunuz?",
                kind=QuestionKind.NUMBER,
            ),
            Question(
                field="public_transport_km",
                label="Yılda toplu taşıma ile kaç km yol yapıyorsunuz?",
                kind=QuestionKind.NUMBER,
            ),
            Question(
                field="flight_hours",
                label="Yılda kaç saat uçuyorsunuz?",
                kind=QuestionKind.NUMBER,
                wide=True,
            ),
        ),
    ),
    Step(
        key="energy",
        title="Enerji",
        description="Evinizin enerji tüketimi",
        icon="🏠",
        section="energy",
        questions=(
            Question(
                field="electricity_kwh",
                label="Aylık elektrik tüketiminiz (kWh)",
                kind=QuestionKind.NUMBER,
                entry_scale=12,
            ),
            Question(
                field="natural_gas_kwh",
                label="Aylık doğal gaz tüketiminiz (kWh)",
                kind=QuestionKind.NUMBER,
                entry_scale=12,
            ),
        ),
    ),
    Step(
        key="lifestyle",
        title="Yaşam Tarzı",
        description="Beslenme ve geri dönüşüm alışkanlıklarınız",
        icon="🥗",
        section="lifestyle",
        questions=(
            Question(
                field="diet_type",
                label="Beslenme tarzınız nedir?",
                placeholder="Beslenme tarzınızı seçin",
                options=_options(
                    (DietType.VEGAN, "Vegan"),
                    (DietType.VEGETARIAN, "Vejetaryen"),
                    (DietType.MIXED, "Karışık"),
                    (DietType.MEAT_HEAVY, "Et ağırlıklı"),
                ),
            ),
            Question(
                field="recycling_frequency",
                label="Ne sıklıkla geri dönüşüm yapıyorsunuz?",
                placeholder="Geri dönüşüm sıklığınızı seçin",
                options=_options(
                    (RecyclingFrequency.OFTEN, "Çok sık"),
                    (RecyclingFrequency.SOMETIMES, "Bazen"),
                    (RecyclingFrequency.NEVER, "Hiç"),
                ),
            ),
        ),
    ),
    RESULTS_STEP,
)
