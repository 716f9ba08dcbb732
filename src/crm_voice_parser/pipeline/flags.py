"""
Data-quality flags for a parsed voice note.

Flags are advisory: they never block validation or change extracted values.
Each condition is evaluated independently, in a fixed order, and raises its
flag at most once. Key point / next step checks use the state before
placeholder insertion.
"""

import structlog

from .customer import CustomerExtraction
from .interaction import InteractionExtraction
from .matching import phrase_pattern

logger = structlog.get_logger(__name__)

CUSTOMER_NAME_MISSING = 'Customer name not identified'
COMPANY_NAME_MISSING = 'Company name not identified'
CONTACT_INFO_MISSING = 'No contact information found'
KEY_POINTS_MISSING = 'No key points identified'
NEXT_STEPS_MISSING = 'No next steps identified'
UNCERTAINTY_DETECTED = 'Uncertainty detected in transcript'
NEEDS_VERIFICATION = 'Information may need verification'

# Word stems: inflected forms (confirmed, verified, checking, tentatively) also raise the flag
UNCERTAINTY_INDICATORS = phrase_pattern(
    ['not sure', 'maybe', 'uncertain', 'unclear', 'tentative', 'possibly'], stems=True
)
VERIFICATION_KEYWORDS = phrase_pattern(['follow up', 'check', 'verif', 'confirm'], stems=True)


def identify_flags(
    segments: list[str],
    customer: CustomerExtraction,
    interaction: InteractionExtraction,
) -> list[str]:
    """
    Inspect extraction results and raw segments for quality gaps.

    Args:
        segments: Normalized transcript segments
        customer: Customer extraction result
        interaction: Interaction extraction result

    Returns:
        Ordered, duplicate-free list of flag strings
    """
    flags: list[str] = []

    if not customer.name_identified:
        flags.append(CUSTOMER_NAME_MISSING)
    if not customer.company_identified:
        flags.append(COMPANY_NAME_MISSING)
    if not customer.has_contact_info:
        flags.append(CONTACT_INFO_MISSING)
    if not interaction.key_points_found:
        flags.append(KEY_POINTS_MISSING)
    if not interaction.next_steps_found:
        flags.append(NEXT_STEPS_MISSING)
    if any(UNCERTAINTY_INDICATORS.search(segment) for segment in segments):
        flags.append(UNCERTAINTY_DETECTED)
    if any(VERIFICATION_KEYWORDS.search(segment) for segment in segments):
        flags.append(NEEDS_VERIFICATION)

    if flags:
        logger.debug('flag_identification.flags_raised', flags=flags)
    return flags
