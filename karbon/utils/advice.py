"""Static advice tips shown on the results step.

The lists are fixed per variant and do not depend on the answers.
"""

HABITS_TIPS = (
    "Haftada 2-3 gün et tüketmeyerek yıllık 500-800 kg CO₂ tasarruf edebilirsiniz.",
    "Düzenli geri dönüşüm yaparak karbon ayak izinizi %10 azaltabilirsiniz.",
    "Yenilenebilir enerji kullanarak emisyonlarınızı %20 düşürebilirsiniz.",
    "Toplu taşımayı tercih ederek günlük 3-5 kg CO₂ tasarruf edebilirsiniz.",
    "Organik ve yerel gıdalar tercih ederek beslenme kaynaklı emisyonları azaltın.",
    "Su tasarrufu yaparak yıllık 200 kg CO₂ tasarruf edebilirsiniz.",
    "Işık tasarrufu yaparak elektrik tüketiminizi %5-10 azaltın.",
    "Ağaç dikme etkinliklerine katılarak doğaya katkıda bulunun.",
    "Online alışverişi azaltarak kargo kaynaklı emisyonları düşürün.",
)

USAGE_TIPS = (
    "Kısa mesafelerde araba yerine toplu taşıma veya bisiklet tercih edin.",
    "Uçak yolculuklarını azaltarak yıllık emisyonlarınızı önemli ölçüde düşürebilirsiniz.",
    "Enerji verimli cihazlar kullanarak elektrik tüketiminizi azaltın.",
    "Bitki ağırlıklı beslenerek gıda kaynaklı emisyonlarınızı yarıya indirebilirsiniz.",
)
