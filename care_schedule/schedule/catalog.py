"""Fixed treatment catalog.

Entry names and categories used by the rule engine. These are constants,
not user-editable configuration.
"""

from care_schedule.schedule.enums import TreatmentCategory
from care_schedule.schedule.models import DividerEntry, TreatmentEntry

# Daily base entries
MINOXIDIL = TreatmentEntry("Minoxidil", TreatmentCategory.MINOXIDIL)
RED_LIGHT_THERAPY = TreatmentEntry("Red Light Therapy", TreatmentCategory.LIGHT_THERAPY)
HAIR_SERUM = TreatmentEntry("Hair Serum", TreatmentCategory.SERUM)

# Day-specific entries
RU58841 = TreatmentEntry("RU58841", TreatmentCategory.TOPICAL)
AFTER_GYM_DIVIDER = DividerEntry("After Gym Session")
CAROLS_DAUGHTER_SHAMPOO = TreatmentEntry("Carol's Daughter Shampoo", TreatmentCategory.GENTLE_SHAMPOO)
NIZORAL_SHAMPOO = TreatmentEntry("Nizoral Shampoo", TreatmentCategory.CLARIFYING_SHAMPOO)
MICRONEEDLING = TreatmentEntry("Microneedling (1.25mm)", TreatmentCategory.MICRONEEDLING)
REST_DAY = TreatmentEntry("Rest Day (PRP Week)", TreatmentCategory.REST)

# Saturday evening hair mask, alternating every week from the schedule start
K18_TREATMENT = TreatmentEntry("K18 Treatment", TreatmentCategory.HAIR_MASK)
DEEP_CONDITIONING = TreatmentEntry("Deep Conditioning", TreatmentCategory.HAIR_MASK)

# Special-event day override
PRP_TREATMENT = TreatmentEntry("PRP Treatment", TreatmentCategory.PROCEDURE)
GENTLE_CARE = TreatmentEntry("Gentle Care & Rest", TreatmentCategory.RECOVERY)
