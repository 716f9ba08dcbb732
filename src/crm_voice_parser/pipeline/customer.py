"""
Customer extraction: name, company, email and phone.

Each field has an ordered list of patterns, most specific first (explicit
labels before generic "from/at" phrasing). Segments are scanned in order and
the first match for a field wins; a field is never overwritten once set.
"""

import re
from dataclasses import dataclass
from typing import Any

import structlog

from ..models.records import UNKNOWN_COMPANY, UNKNOWN_CUSTOMER, is_valid_email
from .matching import COMPANY, NAME, first_group, title_case

logger = structlog.get_logger(__name__)

_CONTACT_VERBS = (
    r'(?:spoke|speaking|talked|talking|chatted|met|meeting|call|called|demo|'
    r'visited|caught\s+up|sat\s+down)'
)

NAME_PATTERNS: list[re.Pattern[str]] = [
    # "customer name is sarah johnson", "contact named sarah"
    re.compile(rf'\b(?:customer|client|contact)(?:\s+name)?\s+(?:is|named|called)\s+{NAME}'),
    # "call with sarah johnson", "met with john"
    re.compile(rf'\b{_CONTACT_VERBS}\s+with\s+{NAME}'),
    # "spoke to john" ("call to discuss" is not a name)
    re.compile(rf'\b(?:spoke|speaking|talked|talking)\s+to\s+{NAME}'),
    # "met sarah", "called john"
    re.compile(rf'\b(?:spoke|met|called|visited|emailed|phoned)\s+{NAME}'),
    # "the deal with emily rodriguez at innovative solutions"
    re.compile(rf'\bwith\s+{NAME}\s+(?:from|at|of)\b'),
]

COMPANY_PATTERNS: list[re.Pattern[str]] = [
    # "company name is acme", "organization called globex"
    re.compile(
        rf'\b(?:company|organization|organisation|business)(?:\s+name)?\s+'
        rf'(?:is|named|called)\s+{COMPANY}'
    ),
    # "works at initech", "dealing with hooli"
    re.compile(rf'\b(?:works?|working|employed|dealing)\s+(?:at|for|with)\s+{COMPANY}'),
    # "sarah from techstart inc", "emily at innovative solutions"
    re.compile(rf'\b(?:from|at)\s+{COMPANY}'),
]

_EMAIL = r'([a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,})\b'

EMAIL_PATTERNS: list[re.Pattern[str]] = [
    re.compile(rf'\b(?:email|e-mail|mail)(?:\s+address)?\s+(?:is\s+)?{_EMAIL}'),
    re.compile(rf'(?<![a-z0-9._%+-]){_EMAIL}'),
]

_PHONE = r'((?:1[-.\s]?)?\d{3}[-.\s]?\d{3}[-.\s]?\d{4})\b'

PHONE_PATTERNS: list[re.Pattern[str]] = [
    re.compile(rf'\b(?:phone|mobile|cell|number)(?:\s+number)?\s+(?:is\s+)?{_PHONE}'),
    re.compile(rf'\b{_PHONE}'),
]


@dataclass(frozen=True)
class CustomerExtraction:
    """Customer fields recovered from a transcript, sentinels applied."""

    name: str = UNKNOWN_CUSTOMER
    company: str = UNKNOWN_COMPANY
    email: str = ''
    phone: str = ''
    notes: str = ''

    @property
    def name_identified(self) -> bool:
        return bool(self.name) and self.name != UNKNOWN_CUSTOMER

    @property
    def company_identified(self) -> bool:
        return bool(self.company) and self.company != UNKNOWN_COMPANY

    @property
    def has_contact_info(self) -> bool:
        return bool(self.email or self.phone)

    def to_dict(self) -> dict[str, Any]:
        """Wire-format payload, validated later as a CustomerRecord."""
        return {
            'name': self.name,
            'company': self.company,
            'email': self.email,
            'phone': self.phone,
            'notes': self.notes,
        }


class CustomerExtractor:
    """
    Recovers customer identity from normalized segments.

    Name and company are title-cased word by word; emails are lower-cased and
    only accepted when syntactically valid, so a partial match such as
    "not-an-email" never populates the field.
    """

    def extract(self, segments: list[str]) -> CustomerExtraction:
        """
        Scan segments in order, filling each field from its first match.

        Args:
            segments: Normalized transcript segments

        Returns:
            CustomerExtraction with sentinel name/company when unmatched
        """
        name = company = email = phone = ''

        for segment in segments:
            if not name:
                match = first_group(NAME_PATTERNS, segment)
                if match:
                    name = title_case(match)
            if not company:
                match = first_group(COMPANY_PATTERNS, segment)
                if match:
                    company = title_case(match)
            if not email:
                email = self._find_email(segment)
            if not phone:
                phone = first_group(PHONE_PATTERNS, segment) or ''

        customer = CustomerExtraction(
            name=name or UNKNOWN_CUSTOMER,
            company=company or UNKNOWN_COMPANY,
            email=email,
            phone=phone,
        )

        logger.debug(
            'customer_extraction.complete',
            name_identified=customer.name_identified,
            company_identified=customer.company_identified,
            has_email=bool(customer.email),
            has_phone=bool(customer.phone),
        )
        return customer

    def _find_email(self, segment: str) -> str:
        for pattern in EMAIL_PATTERNS:
            for match in pattern.finditer(segment):
                candidate = match.group(1).lower()
                if is_valid_email(candidate):
                    return candidate
        return ''
