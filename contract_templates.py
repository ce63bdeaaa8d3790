"""
contract_templates.py: Starter contract templates.

Each template is a fill-in-the-blanks document ([BRACKETED] placeholders)
that can be browsed, downloaded, or run straight through the analyzer to
see what it flags before any edits are made.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class ContractTemplate:
    id:                str
    title:             str
    category:          str
    description:       str
    risk_level:        str                  # low | medium | high
    common_red_flags:  Tuple[str, ...]
    text:              str

    def to_dict(self, include_text: bool = True) -> dict:
        d = {
            "id":               self.id,
            "title":            self.title,
            "category":         self.category,
            "description":      self.description,
            "risk_level":       self.risk_level,
            "common_red_flags": list(self.common_red_flags),
        }
        if include_text:
            d["text"] = self.text
        return d


_SIGNATURES = """
[PARTY A NAME]
By: ___________________________
Name: [SIGNATORY NAME]
Date: [DATE]

[PARTY B NAME]
By: ___________________________
Name: [SIGNATORY NAME]
Date: [DATE]"""


# ─────────────────────────────────────────────────────────────────────────────
# Template texts
# ─────────────────────────────────────────────────────────────────────────────

_NDA_MUTUAL = """MUTUAL NON-DISCLOSURE AGREEMENT

This Mutual Non-Disclosure Agreement ("Agreement") is entered into as of [DATE] by and between [PARTY A NAME] ("Party A") and [PARTY B NAME] ("Party B"), each a "Party".

The Parties wish to explore a business relationship concerning [PURPOSE] (the "Purpose") and may disclose confidential information to each other in doing so.

1. DEFINITION OF CONFIDENTIAL INFORMATION
"Confidential Information" means non-public information disclosed by either Party that is marked as confidential or that a reasonable person would understand to be confidential, including business plans, customer lists, technical data and source code.

2. EXCLUSIONS
Confidential Information does not include information that is publicly available through no fault of the recipient, was already known to the recipient, is independently developed, or is lawfully received from a third party without restriction.

3. OBLIGATIONS
Each Party receiving Confidential Information agrees to use it only for the Purpose, to protect it with at least reasonable care, and to share it only with advisors who need to know it and are bound by similar obligations.

4. TERM
This Agreement remains in effect for [TERM, e.g., 2 years]. Confidentiality obligations survive for [SURVIVAL PERIOD, e.g., 3 years] after each disclosure.

5. RETURN OF MATERIALS
On request, the recipient shall return or destroy all Confidential Information and confirm this in writing.

6. REMEDIES
Either Party may seek injunctive relief for a breach, in addition to any other remedies available at law.

7. GOVERNING LAW
This Agreement is governed by the laws of [GOVERNING STATE]. Disputes shall first be submitted to good-faith mediation.

8. ENTIRE AGREEMENT AND AMENDMENTS
This Agreement is the entire agreement between the Parties on this subject. Any amendment must be in writing and signed by both Parties.

9. SEVERABILITY
If any provision of this Agreement is held invalid, the remaining provisions continue in full force and effect.
""" + _SIGNATURES

_NDA_ONE_WAY = """ONE-WAY NON-DISCLOSURE AGREEMENT

This Non-Disclosure Agreement ("Agreement") is entered into as of [DATE] by and between [DISCLOSING PARTY NAME] (the "Disclosing Party") and [RECEIVING PARTY NAME] (the "Receiving Party").

The Disclosing Party intends to share information about [PROJECT] with the Receiving Party for the purpose of [PURPOSE] (the "Purpose").

1. CONFIDENTIAL INFORMATION
"Confidential Information" means all non-public information disclosed by the Disclosing Party, in any form, including trade secrets, financial data, pricing, software and technical specifications.

2. EXCLUSIONS
The obligations of this Agreement shall not apply to information that is publicly available through no breach by the Receiving Party, was lawfully in its possession before disclosure, or is independently developed without reference to the Confidential Information.

3. OBLIGATIONS OF THE RECEIVING PARTY
The Receiving Party shall hold the Confidential Information in strict confidence, use it only for the Purpose, and promptly notify the Disclosing Party of any unauthorized use or disclosure.

4. TERM
This Agreement continues for [TERM, e.g., 2 years]. Obligations survive for [SURVIVAL PERIOD, e.g., 5 years] from the date of each disclosure.

5. NO LICENSE
Nothing in this Agreement grants the Receiving Party any licence or right in the Confidential Information.

6. REMEDIES
The Disclosing Party may seek injunctive relief without posting a bond, in addition to any other remedies available at law.

7. GOVERNING LAW AND JURISDICTION
This Agreement is governed by the laws of [GOVERNING STATE]. Any action under it shall be brought in the courts of [JURISDICTION].

8. ENTIRE AGREEMENT
This Agreement is the entire understanding between the Parties regarding the Confidential Information.

9. SEVERABILITY
If any provision is held unenforceable, the remaining provisions remain in full force and effect.
""" + _SIGNATURES

_FREELANCE = """FREELANCE SERVICES AGREEMENT

This Freelance Services Agreement ("Agreement") is entered into as of [DATE] by and between [CLIENT NAME] (the "Client") and [CONTRACTOR NAME] (the "Contractor").

1. SERVICES
The Contractor shall perform the services and provide the deliverables described in Schedule A (the "Deliverables") according to the agreed timeline.

2. COMPENSATION
The Client shall pay the Contractor a total fee of $[TOTAL FEE], with a deposit due on signing and the balance due on final delivery. Invoices are due within 15 days of receipt. Late payments accrue interest at 1.5% per month.

3. REVISIONS
The fee includes [NUMBER, e.g., 3] rounds of revisions. Additional revisions are billed at $[RATE] per hour.

4. INTELLECTUAL PROPERTY
Upon full payment, the Client owns the final Deliverables. The Contractor retains its pre-existing tools and know-how and grants the Client a non-exclusive licence to use them as embedded in the Deliverables.

5. CONFIDENTIALITY
Each Party agrees to keep the other's proprietary information confidential for 2 years after termination.

6. INDEPENDENT CONTRACTOR STATUS
The Contractor is an independent contractor and is responsible for its own taxes, insurance and benefits.

7. TERMINATION
Either party may terminate this Agreement with 14 days written notice. The Client shall pay for all work performed up to the termination date.

8. LIABILITY
The Contractor's total liability under this Agreement shall not exceed the total fees paid by the Client.

9. DISPUTE RESOLUTION AND GOVERNING LAW
Disputes shall first be addressed through good-faith negotiation and then mediation. This Agreement is governed by the laws of [GOVERNING STATE].

10. ENTIRE AGREEMENT
This Agreement is the entire agreement between the Parties.

11. SEVERABILITY
If any provision is held unenforceable, the remaining provisions continue in full force and effect.
""" + _SIGNATURES

_SAAS_TERMS = """TERMS OF SERVICE: [SERVICE NAME]

These Terms of Service ("Terms") govern access to [SERVICE NAME] (the "Service"), a software-as-a-service product operated by [COMPANY NAME] (the "Provider"), by the subscribing customer (the "Customer").

1. SUBSCRIPTION
The Customer may use the Service during the paid subscription term for its internal business purposes, subject to these Terms and the acceptable use policy.

2. FEES AND RENEWAL
Subscription fees are $[AMOUNT] per month, billed in advance. The subscription will automatically renew for successive terms unless cancelled at least 30 days before renewal.

3. CUSTOMER DATA
The Customer retains ownership of its data. The Provider processes Customer data only to provide the Service and as described in the privacy policy.

4. AVAILABILITY
The Provider targets 99.9% monthly uptime, excluding scheduled maintenance announced in advance.

5. WARRANTY DISCLAIMER
Except as expressly stated, the Service is provided "as is" without warranties of any kind.

6. LIMITATION OF LIABILITY
Each party's aggregate liability under these Terms shall not exceed the fees paid in the twelve months preceding the claim.

7. TERMINATION
Either party may terminate for material breach that remains uncured 30 days after written notice.

8. FORCE MAJEURE
Neither party is liable for delays caused by events beyond its reasonable control.

9. GOVERNING LAW
These Terms are governed by the laws of [GOVERNING STATE].

10. SEVERABILITY AND ENTIRE AGREEMENT
If any provision is held invalid, the rest of these Terms remain in effect. These Terms are the entire agreement between the parties regarding the Service.
"""

_CONSULTING = """CONSULTING AGREEMENT

This Consulting Agreement ("Agreement") is entered into as of [DATE] by and between [CLIENT NAME] (the "Client") and [CONSULTANT NAME] (the "Consultant").

1. CONSULTING SERVICES
The Consultant shall provide advisory services as described in each statement of work agreed in writing by both parties.

2. FEES
The Client shall pay the Consultant $[RATE] per hour, invoiced monthly. Invoices are payable within 30 days of receipt.

3. EXPENSES
The Client shall reimburse reasonable pre-approved expenses on presentation of receipts.

4. CONFIDENTIALITY
The Consultant shall keep the Client's confidential information private and use it only to perform the services.

5. WORK PRODUCT
Upon payment, the Client owns the reports and materials prepared specifically for it. The Consultant retains its general methods and know-how.

6. TERMINATION
Either party may terminate this Agreement on 30 days written notice. The Client shall pay for services performed through the termination date.

7. LIABILITY
The Consultant's total liability under this Agreement shall not exceed the fees paid in the preceding six months.

8. GOVERNING LAW
This Agreement is governed by the laws of [GOVERNING STATE].

9. SEVERABILITY
If any provision is held unenforceable, the remaining provisions continue in full force and effect.
""" + _SIGNATURES

_EMPLOYMENT_OFFER = """EMPLOYMENT OFFER LETTER

[DATE]

Dear [CANDIDATE NAME],

[COMPANY NAME] (the "Company") is pleased to offer you employment on the terms below. This offer of employment is contingent on the completion of standard background checks.

1. POSITION
You will be employed as [JOB TITLE], reporting to [MANAGER NAME], starting on [START DATE].

2. COMPENSATION
Your base salary will be $[SALARY] per year, paid in accordance with the Company's regular payroll schedule.

3. BENEFITS
You will be eligible for the Company's standard benefits, including health insurance and [NUMBER] days of paid time off per year.

4. CONFIDENTIALITY AND INVENTIONS
As a condition of employment you will sign the Company's standard confidentiality and inventions agreement, which covers work created within the scope of your employment.

5. EMPLOYMENT RELATIONSHIP
Either you or the Company may end the employment relationship with two weeks written notice.

6. GOVERNING LAW
This letter is governed by the laws of [GOVERNING STATE].

7. SEVERABILITY
If any term of this letter is held unenforceable, the remaining terms remain in effect.

Please sign below to accept this offer.

[COMPANY NAME]
By: ___________________________

Accepted: ___________________________
[CANDIDATE NAME]"""

_INDEPENDENT_CONTRACTOR = """INDEPENDENT CONTRACTOR AGREEMENT

This Independent Contractor Agreement ("Agreement") is entered into as of [DATE] by and between [COMPANY NAME] (the "Company") and [CONTRACTOR NAME] (the "Contractor").

1. ENGAGEMENT
The Company engages the Contractor to perform the services described in Schedule A. The Contractor controls the manner and means of performing the services.

2. RELATIONSHIP
The Contractor is an independent contractor, not an employee. The Contractor is free to provide services to others and is responsible for its own taxes and insurance.

3. PAYMENT
The Company shall pay the Contractor $[RATE] per hour. Invoices are payable within 30 days of receipt.

4. INTELLECTUAL PROPERTY
Upon payment, the Company owns the deliverables created under this Agreement. The Contractor retains its pre-existing materials.

5. CONFIDENTIALITY
The Contractor shall protect the Company's confidential information during the engagement and for 2 years afterwards.

6. TERMINATION
Either party may terminate this Agreement on 14 days written notice. The Company shall pay for services completed through the termination date.

7. LIABILITY
Each party's total liability under this Agreement shall not exceed the fees paid under it.

8. GOVERNING LAW
This Agreement is governed by the laws of [GOVERNING STATE].

9. SEVERABILITY
If any provision is held unenforceable, the remaining provisions continue in full force and effect.
""" + _SIGNATURES

_SOFTWARE_LICENSE = """SOFTWARE LICENSE AGREEMENT

This Software License Agreement ("Agreement") is entered into as of [DATE] by and between [VENDOR NAME] (the "Licensor") and [CUSTOMER NAME] (the "Licensee").

1. GRANT OF LICENSE
The Licensor grants the Licensee a non-exclusive, non-transferable licence to use [SOFTWARE NAME] (the "Software") for its internal business operations during the term.

2. RESTRICTIONS
The Licensee shall not reverse engineer, resell or sublicense the Software except as permitted by law.

3. FEES
The Licensee shall pay an annual licence fee of $[AMOUNT], due within 30 days of invoice.

4. SUPPORT
The Licensor shall provide email support during business hours and make updates available at no extra charge.

5. WARRANTY
The Licensor warrants that the Software will perform materially as described in its documentation for 90 days after delivery.

6. LIMITATION OF LIABILITY
Each party's total liability under this Agreement shall not exceed the fees paid in the twelve months preceding the claim.

7. TERM AND TERMINATION
This Agreement runs for one year. Either party may terminate for material breach on 30 days written notice if the breach is not cured.

8. GOVERNING LAW
This Agreement is governed by the laws of [GOVERNING STATE].

9. SEVERABILITY
If any provision is held unenforceable, the remaining provisions continue in full force and effect.
""" + _SIGNATURES

_PARTNERSHIP = """PARTNERSHIP AGREEMENT

This Partnership Agreement ("Agreement") is entered into as of [DATE] by and between [PARTNER A NAME] and [PARTNER B NAME] (each a "Partner").

1. FORMATION
The Partners form a general partnership under the name [PARTNERSHIP NAME] to carry on the business of [BUSINESS PURPOSE].

2. CAPITAL CONTRIBUTIONS
Each Partner shall make an initial capital contribution of $[AMOUNT]. Additional contributions require the written consent of all Partners.

3. PROFITS AND LOSSES
Profits and losses shall be shared equally between the Partners unless otherwise agreed in writing.

4. MANAGEMENT
Each Partner has an equal vote in the management of the partnership. Decisions outside the ordinary course of business require unanimous consent.

5. WITHDRAWAL
A Partner may withdraw on 90 days written notice. The remaining Partners may purchase the withdrawing Partner's interest at fair market value.

6. DISSOLUTION
On dissolution, partnership assets shall be applied first to debts and then distributed to the Partners in proportion to their capital accounts.

7. DISPUTE RESOLUTION
Disputes shall first be addressed through good-faith negotiation and then mediation.

8. GOVERNING LAW
This Agreement is governed by the laws of [GOVERNING STATE].

9. SEVERABILITY
If any provision is held unenforceable, the remaining provisions continue in full force and effect.
""" + _SIGNATURES

_NON_COMPETE = """NON-COMPETE AGREEMENT

This Non-Compete Agreement ("Agreement") is entered into as of [DATE] by and between [COMPANY NAME] (the "Company") and [INDIVIDUAL NAME] (the "Restricted Party").

1. NON-COMPETE COVENANT
During the Restricted Period, the Restricted Party shall not own, manage or work for any business that competes with the Company's business in [TERRITORY].

2. NON-SOLICITATION
During the Restricted Period, the Restricted Party shall not solicit any customer or employee of the Company with whom it worked during the last 12 months of the relationship.

3. RESTRICTED PERIOD
The restrictions apply during the relationship and for 12 months after it ends.

4. CONSIDERATION
In exchange for these restrictions, the Company provides [CONSIDERATION, e.g., a signing bonus of $[AMOUNT]].

5. REMEDIES
The Company may seek injunctive relief for any breach of this Agreement.

6. GOVERNING LAW
This Agreement is governed by the laws of [GOVERNING STATE].

7. ENTIRE AGREEMENT
This Agreement is the entire agreement between the parties on this subject.

8. SEVERABILITY
If any provision is held unenforceable, the remaining provisions continue in full force and effect.
""" + _SIGNATURES


# ─────────────────────────────────────────────────────────────────────────────
# Catalog
# ─────────────────────────────────────────────────────────────────────────────

TEMPLATES: Tuple[ContractTemplate, ...] = (
    ContractTemplate(
        "nda-mutual", "Mutual Non-Disclosure Agreement", "Confidentiality",
        "A balanced NDA where both parties protect each other's confidential information.",
        "low",
        ("Overbroad definition of confidential information",
         "Perpetual confidentiality obligations",
         "One-sided remedies for breach"),
        _NDA_MUTUAL),
    ContractTemplate(
        "nda-one-way", "One-Way Non-Disclosure Agreement", "Confidentiality",
        "A unilateral NDA for sharing proprietary information with investors, employees or vendors.",
        "medium",
        ("Overbroad definition of confidential information",
         "No time limit on obligations",
         "No carve-out for independently developed information"),
        _NDA_ONE_WAY),
    ContractTemplate(
        "freelance-services", "Freelance Services Agreement", "Services",
        "Scope, payment, IP ownership and termination terms for freelance engagements.",
        "medium",
        ("Unlimited revision clauses",
         "Full IP assignment without fair compensation",
         "Late payment terms exceeding Net-30",
         "Non-compete clauses"),
        _FREELANCE),
    ContractTemplate(
        "saas-terms", "SaaS Terms of Service", "Technology",
        "Terms of service for a subscription software product: fees, data, liability and acceptable use.",
        "medium",
        ("Unilateral modification rights",
         "Broad data usage clauses",
         "Warranty disclaimers",
         "Auto-renewal with long notice periods"),
        _SAAS_TERMS),
    ContractTemplate(
        "consulting-agreement", "Consulting Agreement", "Services",
        "Advisory engagements covering scope, fees, work product and confidentiality.",
        "medium",
        ("Scope creep provisions",
         "Broad IP assignment",
         "Unlimited liability",
         "Termination without payment for work completed"),
        _CONSULTING),
    ContractTemplate(
        "employment-offer", "Employment Offer Letter", "Employment",
        "A formal offer letter covering position, compensation, benefits and standard terms.",
        "medium",
        ("At-will termination without severance",
         "Broad non-compete clauses",
         "IP assignment covering personal projects"),
        _EMPLOYMENT_OFFER),
    ContractTemplate(
        "independent-contractor", "Independent Contractor Agreement", "Services",
        "Establishes a contractor relationship while keeping proper contractor classification.",
        "medium",
        ("Misclassification risk",
         "Broad IP assignment",
         "Exclusivity requirements"),
        _INDEPENDENT_CONTRACTOR),
    ContractTemplate(
        "software-license", "Software License Agreement", "Technology",
        "Usage rights, restrictions, support and liability for commercial software.",
        "medium",
        ("Warranty disclaimers",
         "Low liability caps",
         "Automatic price increases"),
        _SOFTWARE_LICENSE),
    ContractTemplate(
        "partnership-agreement", "Partnership Agreement", "Business Formation",
        "A general partnership covering capital, profit sharing, management and dissolution.",
        "high",
        ("Joint and several liability",
         "Personal guarantees",
         "Unequal exit terms"),
        _PARTNERSHIP),
    ContractTemplate(
        "non-compete", "Non-Compete Agreement", "Employment",
        "A standalone agreement restricting competitive activity after a relationship ends.",
        "high",
        ("Overly broad geographic scope",
         "Excessive duration",
         "No consideration provided"),
        _NON_COMPETE),
)

_BY_ID = {t.id: t for t in TEMPLATES}


def list_templates(category: Optional[str] = None) -> List[ContractTemplate]:
    """All templates in catalog order, optionally filtered by category (case-insensitive)."""
    if not category:
        return list(TEMPLATES)
    wanted = category.strip().lower()
    return [t for t in TEMPLATES if t.category.lower() == wanted]


def get_template(template_id: str) -> ContractTemplate:
    """Raises KeyError for an unknown id."""
    if template_id not in _BY_ID:
        raise KeyError(template_id)
    return _BY_ID[template_id]


def template_categories() -> List[str]:
    return list(dict.fromkeys(t.category for t in TEMPLATES))
