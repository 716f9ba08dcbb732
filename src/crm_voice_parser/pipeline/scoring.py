"""
Confidence scoring.

Deterministic additive-penalty model: start at 1.0, subtract a fixed penalty
for every missing field and for every flag raised, clamp to [0, 1]. Flag
conditions overlap the field penalties, so those gaps are counted twice.
"""

from ..models.records import InteractionType
from .customer import CustomerExtraction
from .interaction import InteractionExtraction

NAME_PENALTY = 0.15
COMPANY_PENALTY = 0.10
EMAIL_PENALTY = 0.05
PHONE_PENALTY = 0.05
OTHER_TYPE_PENALTY = 0.10
KEY_POINTS_PENALTY = 0.10
NEXT_STEPS_PENALTY = 0.10
PER_FLAG_PENALTY = 0.05


def calculate_confidence(
    customer: CustomerExtraction,
    interaction: InteractionExtraction,
    flags: list[str],
) -> float:
    """
    Score how complete the extraction is.

    Args:
        customer: Customer extraction result
        interaction: Interaction extraction result (pre-placeholder state is used)
        flags: Flags raised for this transcript

    Returns:
        Confidence in [0.0, 1.0], rounded to two decimals
    """
    score = 1.0

    if not customer.name_identified:
        score -= NAME_PENALTY
    if not customer.company_identified:
        score -= COMPANY_PENALTY
    if not customer.email:
        score -= EMAIL_PENALTY
    if not customer.phone:
        score -= PHONE_PENALTY

    if interaction.type == InteractionType.OTHER:
        score -= OTHER_TYPE_PENALTY
    if not interaction.key_points_found:
        score -= KEY_POINTS_PENALTY
    if not interaction.next_steps_found:
        score -= NEXT_STEPS_PENALTY

    score -= len(flags) * PER_FLAG_PENALTY

    return round(max(0.0, min(1.0, score)), 2)
