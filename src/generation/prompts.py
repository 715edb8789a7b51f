# src/generation/prompts.py — v1
"""Prompt templates, one per document type.

Each template asks for plain text (no HTML), lists the caller's data and
spells out the expected document structure. Optional fields are left out of
the data block when blank.
"""

from __future__ import annotations

from collections.abc import Callable

from contractgen.config.document_types import DocumentType, UnknownDocumentTypeError
from contractgen.core.models import FieldRecord

PromptBuilder = Callable[[FieldRecord], str]


def _value(fields: FieldRecord, name: str) -> str:
    value = fields.get(name)
    if value is None or isinstance(value, bytes):
        return ""
    return str(value).strip()


def _line(label: str, fields: FieldRecord, name: str) -> str | None:
    value = _value(fields, name)
    return f"{label}: {value}" if value else None


def _party(fields: FieldRecord, name: str, address: str) -> str:
    value = _value(fields, name)
    addr = _value(fields, address)
    return f"{value} | {addr}" if addr else value


def _data_block(lines: list[str | None]) -> str:
    return "\n".join(line for line in lines if line)


def _employment_data(fields: FieldRecord, recipient_label: str) -> str:
    return _data_block([
        f"Employer: {_party(fields, 'company_name', 'company_address')}",
        f"{recipient_label}: {_value(fields, 'recipient_name')}",
        f"Position: {_value(fields, 'position')}",
        _line("Location", fields, "location"),
        f"Start Date: {_value(fields, 'start_date')}",
        _line("Term", fields, "duration"),
        _line("Working Days", fields, "working_days"),
        f"Hours: {_value(fields, 'working_hours')}",
        f"Compensation: {_value(fields, 'compensation')}",
        _line("Benefits", fields, "benefits"),
        _line("Additional Terms", fields, "additional_terms"),
    ])


def offer_letter_prompt(fields: FieldRecord) -> str:
    position = _value(fields, "position")
    return f"""Generate a professional Employment Offer Letter:

CONTEXT:
- Output: Plain text only (no HTML)
- Document Style: Formal business letter
- Purpose: Extend job offer with clear terms

DATA:
{_employment_data(fields, "Candidate")}

DOCUMENT STRUCTURE:
1. Company Letterhead (placeholder: [LOGO_IMAGE])
2. Current Date
3. Candidate's Name and Address
4. Subject Line: "Offer of Employment: {position}"
5. Welcoming Introduction
6. Position Details: Title, Department, Reporting Structure
7. Start Date and Location
8. Compensation Package
9. Benefits Summary
10. Working Hours and Conditions
11. Employment Terms (At-will status, probation, etc.)
12. Acceptance Instructions
13. Closing
14. Signature Block (placeholder: [SIGNATURE_IMAGE])

FORMAT REQUIREMENTS:
- Use professional business letter format
- Keep tone warm yet professional
- Clear paragraph breaks between sections
- Include signature line for company representative
"""


def employment_contract_prompt(fields: FieldRecord) -> str:
    return f"""Generate a comprehensive Employment Contract:

CONTEXT:
- Output: Plain text only (no HTML)
- Document Style: Formal legal agreement
- Purpose: Define employment relationship and terms

DATA:
{_employment_data(fields, "Employee")}

DOCUMENT STRUCTURE:
1. Title: "EMPLOYMENT CONTRACT"
2. Parties: Employer and employee identification
3. Position & Duties: Job title, responsibilities, reporting structure
4. Term: Employment start date, probationary period if applicable
5. Compensation: Salary/wages, payment schedule, bonus structure
6. Benefits: Insurance, retirement, time off policies
7. Work Schedule: Hours, location, flexibility
8. Confidentiality: Protection of company information
9. Intellectual Property: Ownership of work product
10. Non-Compete/Non-Solicitation (if applicable)
11. Termination Conditions: Notice periods, severance
12. Governing Law
13. Dispute Resolution
14. Signatures

FORMAT REQUIREMENTS:
- Clear section headings
- Numbered or bulleted clauses for clarity
- Professional legal language but plain enough for non-lawyers
- Signature blocks for both employer and employee
"""


def rental_contract_prompt(fields: FieldRecord) -> str:
    data = _data_block([
        f"- Landlord Name: {_value(fields, 'owner_name')}",
        f"- Landlord Address: {_value(fields, 'owner_address')}",
        f"- Tenant Name: {_value(fields, 'recipient_name')}",
        f"- Property Address: {_value(fields, 'property_address')}",
        _line("- Lease Start Date", fields, "start_date"),
        f"- Lease Duration: {_value(fields, 'duration')}",
        f"- Monthly Rent: {_value(fields, 'rent_amount')}",
        _line("- Security Deposit", fields, "security_deposit"),
        _line("- Tenant Utilities Responsibility", fields, "utilities"),
        _line("- Jurisdiction State", fields, "state"),
    ])
    return f"""Generate a legally binding Residential Lease Agreement using the following fields:

{data}

The agreement must include:

1. Parties: Identify both Landlord and Tenant, including full legal names and address.
2. Leased Premises: Specify the rental property address and its use as a private residence.
3. Lease Term: Define the start date, duration, and conversion to month-to-month unless terminated with 30 days' written notice.
4. Rent: Specify rent amount, due date (1st of each month), grace period (until the 5th), late fee (5%), and payment method.
5. Security Deposit: State the deposit amount, its purpose, and return conditions.
6. Utilities & Maintenance: Tenant's utility responsibilities and landlord's repair duties.
7. Access Rights: Landlord access with 24 hours' notice; emergency access without notice.
8. Tenant Obligations: No illegal activity, no subletting without consent, no structural changes, renter's insurance.
9. Termination Terms: Early termination (60-day notice) and return of premises condition.
10. Legal Provisions: Governing law, entire agreement, notices, and severability.

Include signature blocks for:
- Landlord
- Tenant
- Optional Witness

Output plain text only (no HTML), with clear section titles.
"""


def freelance_contract_prompt(fields: FieldRecord) -> str:
    data = _data_block([
        f"Client: {_party(fields, 'company_name', 'company_address')}",
        f"Freelancer: {_value(fields, 'recipient_name')}",
        f"Project: {_value(fields, 'project_scope')}",
        f"Deliverables: {_value(fields, 'deliverables')}",
        f"Payment: {_value(fields, 'payment_terms')}",
        _line("Revisions", fields, "revisions"),
        _line("Additional Terms", fields, "additional_terms"),
    ])
    return f"""Generate a professional Freelance Service Agreement:

CONTEXT:
- Output: Plain text only (no HTML)
- Document Style: Comprehensive but clear contract
- Purpose: Define service terms between freelancer and client

DATA:
{data}

DOCUMENT STRUCTURE:
1. Header: "FREELANCE SERVICE AGREEMENT"
2. Parties: Clear identification of client and freelancer
3. Services: Detailed project scope and deliverables
4. Timeline: Project schedule, milestones, deadlines
5. Compensation: Payment amounts, schedule, method
6. Revision Process: Number of revisions, feedback cycle
7. Intellectual Property: Ownership of deliverables
8. Confidentiality: Protection of sensitive information
9. Independent Contractor Status: Tax and employment clarification
10. Termination: Conditions, notice periods, kill fees
11. Limitation of Liability
12. Dispute Resolution

FORMAT REQUIREMENTS:
- Use clear section headings
- Include bullet points for key terms
- Use plain language while maintaining legal validity
- Include signature blocks for both parties
"""


PROMPT_BUILDERS: dict[DocumentType, PromptBuilder] = {
    DocumentType.OFFER_LETTER: offer_letter_prompt,
    DocumentType.EMPLOYMENT_CONTRACT: employment_contract_prompt,
    DocumentType.RENTAL_CONTRACT: rental_contract_prompt,
    DocumentType.FREELANCE_CONTRACT: freelance_contract_prompt,
}


def build_prompt(document_type: DocumentType, fields: FieldRecord) -> str:
    """Render the generation prompt for ``document_type``.

    Raises:
        UnknownDocumentTypeError: If no template exists for the type.
    """
    builder = PROMPT_BUILDERS.get(document_type)
    if builder is None:
        raise UnknownDocumentTypeError(document_type)
    return builder(fields)
