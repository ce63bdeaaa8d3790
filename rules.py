"""
Rule catalog for the contract analyzer.

Plain data only: red-flag rules, document-type keyword groups, canned
recommendations, clause-annotation rules and negotiation templates.
The matching code lives in analyzer.py / clauses.py / playbook.py and
never special-cases a rule id, so rules can be added or tuned here
without touching the engine.

Pattern order inside a rule matters: the first alternative that matches
decides which snippet is reported.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple


SEVERITY_ORDER = {"high": 0, "medium": 1, "low": 2}
COLOR_ORDER    = {"red": 0, "yellow": 1, "green": 2}
PRIORITY_ORDER = {"must-negotiate": 0, "should-negotiate": 1, "nice-to-have": 2}


# ─────────────────────────────────────────────────────────────────────────────
# Rule types
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class RedFlagRule:
    id:            str
    name:          str
    severity:      str                # high | medium | low
    patterns:      Tuple[str, ...]    # alternatives, tried in order
    description:   str
    plain_english: str


@dataclass(frozen=True)
class DocumentTypeRule:
    key:       str
    label:     str
    primary:   Optional[str]          # regex over lower-cased text
    secondary: Optional[str] = None


@dataclass(frozen=True)
class ClauseAnnotationRule:
    id:            str
    name:          str
    severity:      str
    color:         str                # red | yellow | green
    patterns:      Tuple[str, ...]
    description:   str
    plain_english: str
    suggestion:    Optional[str] = None


@dataclass(frozen=True)
class NegotiationTemplate:
    flag_id:            str
    priority:           str           # must-negotiate | should-negotiate | nice-to-have
    suggested_language: Optional[str]
    tip:                str
    leverage_points:    Tuple[str, ...]


# ─────────────────────────────────────────────────────────────────────────────
# Red-flag rules  (evaluated in this order)
# ─────────────────────────────────────────────────────────────────────────────

RED_FLAG_RULES: Tuple[RedFlagRule, ...] = (
    RedFlagRule(
        "unlimited_liability", "Unlimited Liability", "high",
        (r"unlimited liability",
         r"liable for (?:any and )?all (?:losses|damages)",
         r"without (?:any )?limitation (?:of|on) (?:its |their |your )?liability",
         r"liability (?:shall|will) not be (?:limited|capped)"),
        "Liability is not capped.",
        "If something goes wrong you could owe far more than the contract is worth. "
        "There is no ceiling on what can be claimed against you."),
    RedFlagRule(
        "broad_indemnification", "Broad Indemnification", "high",
        (r"indemnify,? defend,? and hold harmless",
         r"indemnify and hold harmless",
         r"indemnify[^.]{0,80}any and all (?:claims|losses|liabilities)"),
        "You must cover the other side's losses and legal costs.",
        "You agree to pay for claims brought against the other party, even claims "
        "you did not cause, including their lawyers' bills."),
    RedFlagRule(
        "ip_assignment", "Broad IP Assignment", "high",
        (r"hereby (?:irrevocably )?assigns?[^.]{0,80}(?:intellectual property|rights)",
         r"all rights?, title,? and interest",
         r"works? made for hire"),
        "Ownership of your work transfers to the other party.",
        "Everything you create may belong to them, possibly including tools and "
        "ideas you had before this contract."),
    RedFlagRule(
        "non_compete", "Non-Compete Restriction", "high",
        (r"non[- ]?compet(?:e|ition)",
         r"covenant not to compete",
         r"agrees? not to compete"),
        "Restricts where and for whom you can work.",
        "You may be barred from working in your field or for competitors for a "
        "period of time after this contract ends."),
    RedFlagRule(
        "unilateral_termination", "Unilateral Termination", "high",
        (r"terminate[^.]{0,60}at any time[^.]{0,40}(?:without cause|without notice|for any reason)",
         r"terminate[^.]{0,60}for any reason or no reason",
         r"terminate[^.]{0,60}(?:in|at) (?:its|their) sole discretion"),
        "One party can end the contract whenever it likes.",
        "The other side can walk away at any moment, leaving you without work or "
        "payment you were counting on."),
    RedFlagRule(
        "waiver_of_rights", "Waiver of Legal Rights", "high",
        (r"waives? (?:any and all|all|any) (?:rights?|claims?)",
         r"class action waiver",
         r"waive[^.]{0,40}jury trial",
         r"waives?[^.]{0,30}right to (?:sue|participate)"),
        "You give up legal protections you would otherwise have.",
        "By signing you may lose the right to go to court, join a class action or "
        "bring certain claims at all."),
    RedFlagRule(
        "liquidated_damages", "Liquidated Damages / Penalties", "high",
        (r"liquidated damages",
         r"penalty of \$?[\d,]+",
         r"shall pay a penalty"),
        "Fixed penalty amounts apply on breach.",
        "A pre-set amount becomes payable if you break the contract, whether or "
        "not the other side actually lost that much."),
    RedFlagRule(
        "personal_guarantee", "Personal Guarantee", "high",
        (r"personal(?:ly)? guarant",
         r"jointly and severally liable"),
        "You are personally on the hook for the obligations.",
        "Your own savings and assets, not just your company's, could be used to "
        "pay what is owed."),
    RedFlagRule(
        "forfeiture_on_termination", "Forfeiture of Earned Payment", "high",
        (r"forfeit[^.]{0,60}(?:fees|compensation|payment|commission)",
         r"no (?:further )?(?:payment|compensation) (?:shall be|will be|is) (?:due|owed|payable)[^.]{0,40}terminat"),
        "Money already earned can be withheld.",
        "If the contract ends early you might not be paid for work you have "
        "already done."),
    RedFlagRule(
        "unilateral_modification", "Unilateral Amendments", "high",
        (r"reserves? the right to (?:modify|amend|change|update)",
         r"may (?:modify|amend|change) (?:these terms|this agreement)[^.]{0,40}at any time",
         r"(?:modify|amend|change)[^.]{0,60}without (?:prior )?notice"),
        "The other party can rewrite the deal on its own.",
        "The terms you sign today can be changed later without your agreement."),
    RedFlagRule(
        "auto_renewal", "Automatic Renewal", "medium",
        (r"automatic(?:ally)? renew",
         r"auto[- ]?renew",
         r"evergreen"),
        "The contract renews itself unless cancelled in time.",
        "You will keep being bound, and usually billed, unless you remember to "
        "cancel before a deadline."),
    RedFlagRule(
        "mandatory_arbitration", "Mandatory Arbitration", "medium",
        (r"binding arbitration",
         r"mandatory arbitration",
         r"submit(?:ted)? to arbitration"),
        "Disputes go to private arbitration instead of court.",
        "You cannot take a dispute to a judge. Arbitration can be costly and its "
        "decisions are hard to appeal."),
    RedFlagRule(
        "sole_discretion", "Sole Discretion", "medium",
        (r"sole (?:and absolute )?discretion",
         r"absolute discretion"),
        "Key decisions are left entirely to one party.",
        "The other side gets to decide important questions without having to be "
        "reasonable or explain why."),
    RedFlagRule(
        "non_solicitation", "Non-Solicitation", "medium",
        (r"non[- ]?solicit",
         r"shall not[^.]{0,40}solicit"),
        "Limits who you may approach for work or hire.",
        "You may not be allowed to work with the other party's clients or staff, "
        "even if they approach you."),
    RedFlagRule(
        "exclusivity", "Exclusivity Requirement", "medium",
        (r"on an exclusive basis",
         r"exclusive (?:provider|supplier|relationship|dealing)",
         r"shall not (?:provide|perform|offer) (?:similar|the same|comparable) services"),
        "You may work only for this party.",
        "Taking on other clients or customers in the same area could put you in "
        "breach."),
    RedFlagRule(
        "extended_payment_terms", "Slow Payment Terms", "medium",
        (r"net[- ]?(?:45|60|90|120)\b",
         r"within (?:45|60|90|120) days (?:of|after|following) (?:receipt|invoice|the invoice)"),
        "Payment is due long after the work is done.",
        "You may wait two months or more to be paid, which strains your cash flow."),
    RedFlagRule(
        "unlimited_revisions", "Unlimited Revisions", "medium",
        (r"unlimited (?:revisions|changes|rounds)",
         r"revisions? until[^.]{0,40}satisf",
         r"as many revisions as"),
        "No limit on rework requests.",
        "The client can keep asking for changes without paying more."),
    RedFlagRule(
        "broad_confidentiality", "Overbroad Confidentiality", "medium",
        (r"any and all information",
         r"whether or not (?:marked|designated) (?:as )?confidential",
         r"all information[^.]{0,40}(?:of any kind|in any form)"),
        "Almost everything is treated as confidential.",
        "The definition is so wide that ordinary know-how or public facts could be "
        "off-limits for you."),
    RedFlagRule(
        "perpetual_obligations", "Perpetual Obligations", "medium",
        (r"in perpetuity",
         r"survive[^.]{0,40}indefinitely",
         r"(?:shall|will) remain in effect indefinitely"),
        "Some duties never expire.",
        "You could be bound by these promises for the rest of your life."),
    RedFlagRule(
        "limited_remedies", "Limited Remedies", "medium",
        (r"sole (?:and exclusive )?remedy",
         r"exclusive remedy"),
        "Your options when things go wrong are restricted.",
        "If the other side fails to deliver, you may be stuck with a credit or "
        "re-do instead of real compensation."),
    RedFlagRule(
        "price_changes", "Unilateral Price Changes", "medium",
        (r"(?:increase|adjust|change|modify) (?:the )?(?:fees|prices|pricing|rates)[^.]{0,40}(?:at any time|without notice|in its sole discretion)",
         r"may (?:increase|adjust|change) (?:its |the )?(?:fees|prices|pricing|rates)"),
        "Prices can go up during the contract.",
        "What you pay can rise after you sign, sometimes with little warning."),
    RedFlagRule(
        "broad_data_rights", "Broad Data Use", "medium",
        (r"(?:sell|license|share|disclose)[^.]{0,40}(?:personal|customer|user) (?:data|information)[^.]{0,40}third part",
         r"use[^.]{0,30}(?:data|information) for any purpose"),
        "Your data can be used or passed on widely.",
        "Information you hand over may be shared with or sold to others."),
    RedFlagRule(
        "one_sided_attorney_fees", "One-Sided Legal Fees", "medium",
        (r"(?:pay|reimburse|responsible for)[^.]{0,60}(?:attorneys?'?s?|legal) fees",),
        "You may have to pay the other side's lawyers.",
        "In a dispute you could end up covering their legal bills as well as "
        "your own."),
    RedFlagRule(
        "early_termination_fee", "Early Termination Fee", "medium",
        (r"early termination (?:fee|penalty|charge)",
         r"cancellation (?:fee|penalty|charge)"),
        "Leaving early costs money.",
        "Getting out of the contract before it ends triggers a fee."),
    RedFlagRule(
        "vague_scope", "Open-Ended Scope", "low",
        (r"other (?:duties|tasks|services) as (?:may be )?(?:assigned|requested|required|directed)",
         r"including but not limited to any (?:other )?services"),
        "The work you owe is not clearly bounded.",
        "You could be asked to do extra work that was never priced into the deal."),
    RedFlagRule(
        "warranty_disclaimer", "Warranty Disclaimer", "low",
        (r"provided [\"“]?as[- ]is",
         r"disclaims? (?:all|any) warranties",
         r"without warranty of any kind"),
        "No promises are made about quality.",
        "If what you receive does not work as expected you may have little "
        "recourse."),
    RedFlagRule(
        "assignment_without_consent", "One-Sided Assignment", "low",
        (r"may (?:freely )?assign[^.]{0,60}without[^.]{0,30}consent",
         r"freely assign"),
        "The contract can be handed to someone else.",
        "You could end up dealing with a company you never chose to work with."),
    RedFlagRule(
        "exclusive_jurisdiction", "Distant Exclusive Venue", "low",
        (r"exclusive jurisdiction",
         r"exclusively in the (?:state or federal )?courts"),
        "Disputes must be heard in one specific place.",
        "If that court is far away, defending yourself becomes expensive."),
    RedFlagRule(
        "moral_rights_waiver", "Moral Rights Waiver", "low",
        (r"moral rights",),
        "You give up credit and integrity rights in your work.",
        "Your work can be changed or used without naming you."),
    RedFlagRule(
        "long_notice_period", "Long Notice Period", "low",
        (r"(?:90|120|180) days'? (?:prior )?(?:written )?notice",
         r"(?:ninety|one hundred twenty|one hundred eighty) \(\d+\) days'? (?:prior )?(?:written )?notice"),
        "Ending the contract requires a long heads-up.",
        "You need to give months of notice before you can leave or cancel."),
)

SEVERABILITY_TOKEN = "severab"

SEVERABILITY_FLAG = RedFlagRule(
    "severability_missing", "Missing Severability Clause", "low",
    (),
    "No severability clause was found.",
    "Without it, one invalid term could put the whole contract in question.",
)


# ─────────────────────────────────────────────────────────────────────────────
# Document types  (declaration order breaks score ties)
# ─────────────────────────────────────────────────────────────────────────────

DOCUMENT_TYPE_RULES: Tuple[DocumentTypeRule, ...] = (
    DocumentTypeRule("nda", "Non-Disclosure Agreement",
        r"non-?disclosure agreement|confidentiality agreement|\bnda\b",
        r"confidential information|disclosing party|receiving party"),
    DocumentTypeRule("employment", "Employment Agreement",
        r"employment agreement|offer of employment|offer letter|employment contract",
        r"\bemployee\b|\bemployer\b|base salary|at-will"),
    DocumentTypeRule("freelance", "Freelance Services Agreement",
        r"freelance",
        r"deliverables|kill fee|rounds of revisions"),
    DocumentTypeRule("contractor", "Independent Contractor Agreement",
        r"independent contractor agreement",
        r"independent contractor|\bcontractor\b"),
    DocumentTypeRule("consulting", "Consulting Agreement",
        r"consulting agreement",
        r"\bconsultant\b|advisory services"),
    DocumentTypeRule("saas", "SaaS / Terms of Service",
        r"terms of service|software[- ]as[- ]a[- ]service|\bsaas\b",
        r"subscription|uptime|acceptable use"),
    DocumentTypeRule("license", "Software License Agreement",
        r"license agreement|end[- ]user license",
        r"\blicensor\b|\blicensee\b|sublicens"),
    DocumentTypeRule("lease", "Lease / Rental Agreement",
        r"lease agreement|rental agreement|residential lease",
        r"\blandlord\b|\btenant\b|security deposit"),
    DocumentTypeRule("partnership", "Partnership Agreement",
        r"partnership agreement|joint venture agreement",
        r"capital contributions?|profits and losses"),
    DocumentTypeRule("non_compete", "Non-Compete Agreement",
        r"non-?compet(?:e|ition) agreement|covenant not to compete",
        r"restricted period|restricted territory|non-?solicitation"),
)

GENERAL_DOCUMENT_TYPE = DocumentTypeRule("general", "General Contract", None, None)


# ─────────────────────────────────────────────────────────────────────────────
# Recommendations  (flag id -> (priority, advice))
# ─────────────────────────────────────────────────────────────────────────────

RECOMMENDATIONS: Dict[str, Tuple[str, str]] = {
    "unlimited_liability":       ("high",   "Negotiate a liability cap, typically the fees paid under the contract in the prior 12 months."),
    "broad_indemnification":     ("high",   "Limit indemnification to claims caused by your own negligence or breach, and make it mutual."),
    "ip_assignment":             ("high",   "Keep ownership of pre-existing IP and tools; assign only the final deliverables, and only after full payment."),
    "non_compete":               ("high",   "Narrow the non-compete to a short period, a defined territory and direct competitors, or remove it."),
    "unilateral_termination":    ("high",   "Require written notice and payment for all work performed up to the termination date."),
    "waiver_of_rights":          ("high",   "Strike waivers of jury trial and class actions, or make them mutual and narrowly scoped."),
    "liquidated_damages":        ("high",   "Tie any liquidated damages to a reasonable estimate of actual loss and cap them."),
    "personal_guarantee":        ("high",   "Refuse personal guarantees; obligations should sit with the business entity only."),
    "forfeiture_on_termination": ("high",   "Ensure all fees earned before termination remain payable regardless of how the contract ends."),
    "unilateral_modification":   ("high",   "Require that amendments be in writing and signed by both parties."),
    "auto_renewal":              ("medium", "Add a renewal reminder obligation and the right to cancel with 30 days' notice before renewal."),
    "mandatory_arbitration":     ("medium", "Ask for mediation first, a neutral venue, and a carve-out for small-claims court."),
    "sole_discretion":           ("medium", "Replace \"sole discretion\" with \"reasonable discretion, not to be unreasonably withheld\"."),
    "non_solicitation":          ("medium", "Limit non-solicitation to active solicitation of named clients for no more than 12 months."),
    "exclusivity":               ("medium", "Limit exclusivity to a defined field and term, or ask for higher fees in exchange."),
    "extended_payment_terms":    ("medium", "Shorten payment terms to Net-15 or Net-30 and add late-payment interest."),
    "unlimited_revisions":       ("medium", "Cap the included revision rounds and price additional rounds separately."),
    "broad_confidentiality":     ("medium", "Limit confidential information to material marked as such, with standard exclusions."),
    "perpetual_obligations":     ("medium", "Put a fixed end date on ongoing obligations, typically two to five years."),
    "limited_remedies":          ("medium", "Preserve remedies for material breach beyond service credits or re-performance."),
    "price_changes":             ("medium", "Require advance written notice of price changes and a right to terminate if you do not accept them."),
    "broad_data_rights":         ("medium", "Restrict data use to performing the contract and prohibit sale or sharing without consent."),
    "one_sided_attorney_fees":   ("medium", "Make fee-shifting mutual so the prevailing party recovers reasonable legal fees."),
    "early_termination_fee":     ("medium", "Reduce or remove the early termination fee, or pro-rate it to the remaining term."),
    "vague_scope":               ("low",    "Define the scope of work precisely and price any additional work through change orders."),
    "warranty_disclaimer":       ("low",    "Ask for at least a basic warranty that the deliverables will perform as described."),
    "assignment_without_consent": ("low",   "Require mutual consent for assignment, except to a successor of the whole business."),
    "exclusive_jurisdiction":    ("low",    "Propose a neutral venue or the courts where you are based."),
    "moral_rights_waiver":       ("low",    "Keep the right to be credited for your work where the law allows it."),
    "long_notice_period":        ("low",    "Shorten notice periods to 30 days, or make them equal for both parties."),
    "severability_missing":      ("low",    "Add a severability clause so one invalid provision does not undermine the rest of the contract."),
}

CLEAN_CONTRACT_RECOMMENDATION = (
    "low",
    "This contract looks relatively clean, but have a qualified professional review it before signing.",
)


# ─────────────────────────────────────────────────────────────────────────────
# Clause-annotation rules  (checked against each segmented clause)
# ─────────────────────────────────────────────────────────────────────────────

CLAUSE_RULES: Tuple[ClauseAnnotationRule, ...] = (
    # red
    ClauseAnnotationRule(
        "uncapped_liability", "Uncapped Liability", "high", "red",
        (r"unlimited liability", r"liable for (?:any and )?all (?:losses|damages)",
         r"without (?:any )?limitation (?:of|on) (?:its |their |your )?liability"),
        "Liability has no ceiling.",
        "You could be asked to pay any amount of damages under this clause.",
        "Total liability under this Agreement shall not exceed the fees paid in the twelve (12) months preceding the claim."),
    ClauseAnnotationRule(
        "one_way_indemnity", "One-Way Indemnity", "high", "red",
        (r"indemnify,? defend,? and hold harmless", r"indemnify and hold harmless",
         r"indemnify[^.]{0,80}any and all"),
        "You cover the other side's claims and costs.",
        "This clause makes you pay for losses the other party suffers, including legal fees.",
        "Each party shall indemnify the other only for third-party claims arising from its own gross negligence or wilful misconduct."),
    ClauseAnnotationRule(
        "total_ip_transfer", "Total IP Transfer", "high", "red",
        (r"hereby (?:irrevocably )?assigns?", r"all rights?, title,? and interest", r"works? made for hire"),
        "Ownership of work product moves to the other party.",
        "Whatever you create under this clause, and possibly before it, becomes theirs.",
        "Upon full payment, Contractor assigns to Client the final Deliverables only; Contractor retains all pre-existing materials and tools."),
    ClauseAnnotationRule(
        "restraint_of_trade", "Restraint of Trade", "high", "red",
        (r"non[- ]?compet(?:e|ition)", r"covenant not to compete", r"agrees? not to compete"),
        "Restricts future work.",
        "This clause can stop you from earning a living in your field for a while.",
        "For six (6) months after termination, Contractor shall not provide substantially identical services to Client's named direct competitors."),
    ClauseAnnotationRule(
        "termination_at_will", "Termination at Will", "high", "red",
        (r"terminate[^.]{0,60}at any time[^.]{0,40}(?:without cause|without notice|for any reason)",
         r"terminate[^.]{0,60}for any reason or no reason",
         r"terminate[^.]{0,60}(?:in|at) (?:its|their) sole discretion"),
        "One side can end the deal at any moment.",
        "The contract can disappear overnight with nothing owed to you.",
        "Either party may terminate this Agreement on thirty (30) days' written notice; all fees for work performed remain payable."),
    ClauseAnnotationRule(
        "rights_waiver", "Rights Waiver", "high", "red",
        (r"waives? (?:any and all|all|any) (?:rights?|claims?)", r"class action waiver", r"waive[^.]{0,40}jury trial"),
        "You give up legal rights.",
        "Signing this clause takes away remedies the law would normally give you.",
        None),
    ClauseAnnotationRule(
        "penalty_clause", "Penalty Clause", "high", "red",
        (r"liquidated damages", r"penalty of \$?[\d,]+", r"shall pay a penalty"),
        "A fixed penalty applies on breach.",
        "A set sum is payable if you slip up, regardless of actual harm.",
        "Any liquidated damages shall not exceed a reasonable estimate of actual loss and are the sole remedy for the breach concerned."),
    ClauseAnnotationRule(
        "personal_exposure", "Personal Exposure", "high", "red",
        (r"personal(?:ly)? guarant", r"jointly and severally liable"),
        "You are personally liable.",
        "Your personal assets back this promise.",
        None),
    ClauseAnnotationRule(
        "payment_forfeiture", "Payment Forfeiture", "high", "red",
        (r"forfeit[^.]{0,60}(?:fees|compensation|payment|commission)",),
        "Earned money can be lost.",
        "Fees you have already earned may never be paid.",
        "Upon any termination, Client shall pay for all services performed through the effective date of termination."),
    # yellow
    ClauseAnnotationRule(
        "renews_automatically", "Automatic Renewal", "medium", "yellow",
        (r"automatic(?:ally)? renew", r"auto[- ]?renew", r"evergreen"),
        "Renews unless cancelled.",
        "Put the cancellation deadline in your calendar.",
        "This Agreement renews only upon written confirmation by both parties."),
    ClauseAnnotationRule(
        "arbitration_only", "Arbitration Required", "medium", "yellow",
        (r"binding arbitration", r"mandatory arbitration", r"submit(?:ted)? to arbitration", r"\barbitrat"),
        "Disputes go to arbitration.",
        "You will likely resolve disputes privately rather than in court.",
        "Disputes shall first be submitted to mediation; either party may then pursue its remedies in court."),
    ClauseAnnotationRule(
        "discretionary_power", "Discretionary Power", "medium", "yellow",
        (r"sole (?:and absolute )?discretion", r"absolute discretion"),
        "One party decides alone.",
        "Decisions under this clause do not have to be reasonable.",
        "...in its reasonable discretion, such consent not to be unreasonably withheld or delayed."),
    ClauseAnnotationRule(
        "one_sided_changes", "One-Sided Changes", "high", "yellow",
        (r"reserves? the right to (?:modify|amend|change|update)",
         r"(?:modify|amend|change)[^.]{0,60}without (?:prior )?notice"),
        "Terms can be changed by one side.",
        "What you agreed to today may not be what applies tomorrow.",
        "No amendment shall be effective unless in writing and signed by both parties."),
    ClauseAnnotationRule(
        "solicitation_limits", "Solicitation Limits", "medium", "yellow",
        (r"non[- ]?solicit", r"shall not[^.]{0,40}solicit"),
        "Limits who you may work with or hire.",
        "Check how long the restriction lasts and who it covers.",
        None),
    ClauseAnnotationRule(
        "exclusive_dealing", "Exclusive Dealing", "medium", "yellow",
        (r"on an exclusive basis", r"exclusive (?:provider|supplier|relationship|dealing)"),
        "Exclusivity applies.",
        "You may not be able to serve others in the same area.",
        None),
    ClauseAnnotationRule(
        "slow_payment", "Slow Payment", "medium", "yellow",
        (r"net[- ]?(?:45|60|90|120)\b", r"within (?:45|60|90|120) days (?:of|after|following) (?:receipt|invoice)"),
        "Long wait for payment.",
        "You may not see money for months.",
        "Invoices are payable within fifteen (15) days of receipt; late amounts accrue interest at 1.5% per month."),
    ClauseAnnotationRule(
        "open_revisions", "Open-Ended Revisions", "medium", "yellow",
        (r"unlimited (?:revisions|changes|rounds)", r"revisions? until[^.]{0,40}satisf"),
        "Rework is not capped.",
        "The client can keep requesting changes at no extra cost.",
        "The fee includes up to three (3) rounds of revisions; additional rounds are billed at the hourly rate."),
    ClauseAnnotationRule(
        "wide_confidentiality", "Wide Confidentiality", "medium", "yellow",
        (r"any and all information", r"whether or not (?:marked|designated) (?:as )?confidential", r"in perpetuity"),
        "Confidentiality is broad or never ends.",
        "Check the definition, the exclusions and how long it lasts.",
        None),
    ClauseAnnotationRule(
        "warranty_excluded", "Warranties Excluded", "low", "yellow",
        (r"provided [\"“]?as[- ]is", r"disclaims? (?:all|any) warranties", r"without warranty of any kind"),
        "No quality promises.",
        "You accept what you get, defects included.",
        None),
    ClauseAnnotationRule(
        "remedy_limits", "Remedy Limits", "medium", "yellow",
        (r"sole (?:and exclusive )?remedy", r"exclusive remedy"),
        "Your remedies are restricted.",
        "Compensation may be limited to credits or repairs.",
        None),
    ClauseAnnotationRule(
        "variable_pricing", "Variable Pricing", "medium", "yellow",
        (r"may (?:increase|adjust|change) (?:its |the )?(?:fees|prices|pricing|rates)",),
        "Prices can change.",
        "Make sure you get notice and a way out if prices rise.",
        "Price changes require sixty (60) days' written notice and Customer may terminate without penalty before they take effect."),
    ClauseAnnotationRule(
        "data_sharing", "Data Sharing", "medium", "yellow",
        (r"(?:sell|share|disclose)[^.]{0,40}(?:personal|customer|user) (?:data|information)",
         r"anonymi[sz]ed,? aggregated data"),
        "Data may be reused or shared.",
        "Check who receives your data and for what purpose.",
        None),
    ClauseAnnotationRule(
        "fee_shifting", "Legal Fee Shifting", "medium", "yellow",
        (r"(?:attorneys?'?s?|legal) fees",),
        "Legal costs may shift to you.",
        "Check whether this applies to both sides equally.",
        "In any action to enforce this Agreement, the prevailing party shall recover its reasonable attorneys' fees."),
    ClauseAnnotationRule(
        "exit_costs", "Exit Costs", "medium", "yellow",
        (r"early termination (?:fee|penalty|charge)", r"cancellation (?:fee|penalty|charge)", r"kill fee"),
        "Ending early costs money.",
        "Know the exit price before you sign.",
        None),
    ClauseAnnotationRule(
        "assignment_rights", "Assignment Rights", "low", "yellow",
        (r"may (?:freely )?assign[^.]{0,60}without[^.]{0,30}consent", r"freely assign"),
        "The contract can be transferred.",
        "You could end up dealing with a different company.",
        None),
    # green
    ClauseAnnotationRule(
        "governing_law", "Governing Law", "low", "green",
        (r"governed by (?:and construed in accordance with )?the laws? of", r"governing law"),
        "Sets which law applies.",
        "Standard clause naming the law that governs the contract.",
        None),
    ClauseAnnotationRule(
        "entire_agreement", "Entire Agreement", "low", "green",
        (r"entire agreement", r"entire understanding", r"supersedes all prior"),
        "The written contract is the whole deal.",
        "Promises made outside this document will not count, so get them written in.",
        None),
    ClauseAnnotationRule(
        "severability", "Severability", "low", "green",
        (r"severab", r"remaining provisions shall (?:continue|remain)"),
        "Invalid terms do not sink the contract.",
        "If one clause is struck out, the rest still applies.",
        None),
    ClauseAnnotationRule(
        "force_majeure", "Force Majeure", "low", "green",
        (r"force majeure", r"beyond (?:its |their )?reasonable control", r"acts? of god"),
        "Excuses delays caused by extraordinary events.",
        "Neither side is blamed for disasters outside its control.",
        None),
    ClauseAnnotationRule(
        "liability_cap", "Liability Cap", "low", "green",
        (r"(?:aggregate |total )?liability[^.]{0,60}shall not exceed", r"in no event shall[^.]{0,40}liability exceed"),
        "Liability is capped.",
        "Good: the most either side can owe is limited.",
        None),
    ClauseAnnotationRule(
        "mutual_notice_termination", "Termination on Notice", "low", "green",
        (r"either party may terminate[^.]{0,80}notice",),
        "Either side can leave with notice.",
        "Balanced exit rights with advance warning.",
        None),
    ClauseAnnotationRule(
        "written_amendments", "Written Amendments", "low", "green",
        (r"(?:amendment|modification)[^.]{0,60}(?:in writing and signed|signed by both)",),
        "Changes need both signatures.",
        "Nobody can change the deal without your written agreement.",
        None),
    ClauseAnnotationRule(
        "confidentiality_exclusions", "Confidentiality Exclusions", "low", "green",
        (r"(?:does not include|shall not apply to) information that", r"publicly available through no fault"),
        "Standard carve-outs from confidentiality.",
        "Public or independently developed information is not restricted.",
        None),
    ClauseAnnotationRule(
        "good_faith_resolution", "Good-Faith Dispute Resolution", "low", "green",
        (r"good[- ]faith (?:negotiation|mediation)", r"\bmediation\b"),
        "Disputes start with talks or mediation.",
        "A cheaper first step before anyone goes to court.",
        None),
)


# ─────────────────────────────────────────────────────────────────────────────
# Negotiation templates  (flag id -> template)
# ─────────────────────────────────────────────────────────────────────────────

_NEGOTIATION_TEMPLATES: Tuple[NegotiationTemplate, ...] = (
    NegotiationTemplate(
        "unlimited_liability", "must-negotiate",
        "Except for breaches of confidentiality or wilful misconduct, each party's total liability under this "
        "Agreement shall not exceed the total fees paid or payable in the twelve (12) months preceding the claim.",
        "Anchor the cap to contract value; most counterparties accept a fees-paid cap once asked.",
        ("Liability caps are standard in commercial contracts of this kind.",
         "Uncapped exposure can make the engagement uninsurable for you.",
         "A cap protects both parties and speeds up signing.")),
    NegotiationTemplate(
        "broad_indemnification", "must-negotiate",
        "Each party shall indemnify the other against third-party claims to the extent caused by its own "
        "negligence, wilful misconduct or material breach of this Agreement.",
        "Ask for mutuality first; if refused, narrow the trigger to your own fault.",
        ("Mutual indemnities are market practice.",
         "You cannot insure against claims you did not cause.")),
    NegotiationTemplate(
        "ip_assignment", "must-negotiate",
        "Upon receipt of full payment, Contractor assigns to Client all rights in the final Deliverables. "
        "Contractor retains ownership of all pre-existing materials, tools and know-how and grants Client a "
        "non-exclusive licence to use them as embedded in the Deliverables.",
        "Separate pre-existing IP from new deliverables and tie the transfer to payment.",
        ("Your pre-existing tools are what make you efficient for this client.",
         "Payment-linked assignment is standard for freelance and agency work.")),
    NegotiationTemplate(
        "non_compete", "must-negotiate",
        "For six (6) months following termination, Contractor shall not provide substantially similar services "
        "to the direct competitors of Client listed in Schedule A.",
        "Trade the non-compete for a narrower non-solicitation of named clients.",
        ("Broad non-competes are unenforceable or restricted in many jurisdictions.",
         "A named-competitor list protects the real business interest.",
         "A non-compete without extra compensation is rarely reasonable.")),
    NegotiationTemplate(
        "unilateral_termination", "must-negotiate",
        "Either party may terminate this Agreement on thirty (30) days' written notice. Upon termination, Client "
        "shall pay for all services performed and expenses incurred through the termination date.",
        "If they need flexibility, ask for a notice period and a kill fee in return.",
        ("You commit capacity to this engagement and turn other work away.",
         "Mutual termination rights are the norm.")),
    NegotiationTemplate(
        "waiver_of_rights", "must-negotiate",
        None,
        "Ask for the waiver to be deleted; failing that, make it mutual and keep small-claims court available.",
        ("Waivers of fundamental rights are often unenforceable and invite disputes.",
         "Mutual terms signal good faith on both sides.")),
    NegotiationTemplate(
        "liquidated_damages", "must-negotiate",
        "Any liquidated damages shall represent a genuine pre-estimate of loss, shall not exceed ten percent (10%) "
        "of the fees payable under this Agreement, and shall be the sole remedy for the breach concerned.",
        "Ask how the amount was calculated; an unexplained figure is a penalty.",
        ("Penalties disproportionate to real loss are generally unenforceable.",
         "A cap keeps the risk insurable.")),
    NegotiationTemplate(
        "personal_guarantee", "must-negotiate",
        None,
        "Decline personal guarantees outright; offer a deposit or shorter payment terms instead.",
        ("The business entity, not you personally, is the contracting party.",
         "Alternative security such as a deposit covers the same risk.")),
    NegotiationTemplate(
        "forfeiture_on_termination", "must-negotiate",
        "Upon any termination or expiry, all fees earned and expenses incurred prior to the effective date of "
        "termination shall remain due and payable.",
        "Insist that earned fees survive termination; this is rarely contested when raised.",
        ("Payment for work already delivered is basic fairness.",
         "Forfeiture clauses can be challenged as penalties.")),
    NegotiationTemplate(
        "unilateral_modification", "must-negotiate",
        "No amendment or modification of this Agreement shall be effective unless in writing and signed by "
        "authorised representatives of both parties.",
        "A contract that one side can rewrite is not really a contract; ask for written, signed amendments.",
        ("Mutual amendment is standard boilerplate.",
         "Certainty of terms benefits both parties.")),
    NegotiationTemplate(
        "auto_renewal", "should-negotiate",
        "This Agreement shall renew for successive one-year terms only if neither party gives written notice of "
        "non-renewal at least thirty (30) days before the end of the current term. The provider shall send a "
        "renewal reminder no later than sixty (60) days before renewal.",
        "Keep the renewal but ask for a reminder and a short, fair opt-out window.",
        ("Renewal reminders are required by consumer law in several places.",
         "Customers who can leave easily tend to stay longer.")),
    NegotiationTemplate(
        "mandatory_arbitration", "should-negotiate",
        "Any dispute shall first be referred to mediation. If unresolved within thirty (30) days, either party may "
        "pursue its remedies in the courts of [JURISDICTION]. Claims within small-claims limits may be brought "
        "in small-claims court.",
        "Propose mediation as a first step and keep court available for small claims.",
        ("Arbitration costs can exceed the amount in dispute for small claims.",
         "Mediation resolves most disputes faster and cheaper.")),
    NegotiationTemplate(
        "sole_discretion", "should-negotiate",
        "...in its reasonable discretion, such approval not to be unreasonably withheld, conditioned or delayed.",
        "Swap \"sole\" for \"reasonable\"; it is a one-word change that most parties accept.",
        ("Reasonableness standards are common and well understood by courts.",)),
    NegotiationTemplate(
        "non_solicitation", "should-negotiate",
        "For twelve (12) months after termination, neither party shall actively solicit for employment any "
        "employee of the other party with whom it worked directly under this Agreement. General advertisements "
        "are not solicitation.",
        "Limit it to active solicitation, a short period, and people you actually worked with.",
        ("Mutual non-solicits are market standard.",
         "General job ads should never count as solicitation.")),
    NegotiationTemplate(
        "exclusivity", "should-negotiate",
        None,
        "Price exclusivity: if they want it, ask for a retainer or minimum commitment in return.",
        ("Exclusivity has real opportunity cost for you.",
         "A narrower field of exclusivity covers their actual concern.")),
    NegotiationTemplate(
        "extended_payment_terms", "should-negotiate",
        "Client shall pay each invoice within fifteen (15) days of receipt. Overdue amounts accrue interest at "
        "1.5% per month.",
        "Offer a small early-payment discount in exchange for shorter terms.",
        ("Long payment terms effectively make you finance the client.",
         "Net-15 to Net-30 is common for independent professionals.")),
    NegotiationTemplate(
        "unlimited_revisions", "should-negotiate",
        "The fees include up to three (3) rounds of revisions. Further revisions shall be billed at the agreed "
        "hourly rate.",
        "Define what counts as a revision round and price extra rounds up front.",
        ("Scope clarity prevents disputes on both sides.",)),
    NegotiationTemplate(
        "broad_confidentiality", "should-negotiate",
        "Confidential Information excludes information that is publicly available, already known to the "
        "recipient, independently developed, or lawfully received from a third party.",
        "Add the four standard exclusions; they are uncontroversial.",
        ("The standard exclusions appear in almost every professionally drafted NDA.",)),
    NegotiationTemplate(
        "perpetual_obligations", "should-negotiate",
        "The obligations in this section shall survive for three (3) years following termination, except for "
        "trade secrets, which shall be protected for as long as they remain trade secrets.",
        "Offer indefinite protection for true trade secrets only and a fixed term for everything else.",
        ("Indefinite obligations are hard to track and comply with.",)),
    NegotiationTemplate(
        "price_changes", "should-negotiate",
        "Any change in fees requires at least sixty (60) days' prior written notice, and Customer may terminate "
        "without penalty before the change takes effect.",
        "Ask for a price lock for the first term, or notice plus a right to exit.",
        ("Predictable pricing is needed for budgeting.",
         "An exit right costs the provider nothing if prices are fair.")),
    NegotiationTemplate(
        "one_sided_attorney_fees", "should-negotiate",
        "In any action to enforce this Agreement, the prevailing party shall be entitled to recover its "
        "reasonable attorneys' fees and costs.",
        "Make it a prevailing-party clause so it cuts both ways.",
        ("Mutual fee-shifting discourages weak claims from either side.",)),
    NegotiationTemplate(
        "early_termination_fee", "should-negotiate",
        None,
        "Ask for the fee to decline over the term or to be waived for termination for cause.",
        ("A fee should reflect actual costs, not lock you in.",)),
    NegotiationTemplate(
        "warranty_disclaimer", "nice-to-have",
        "Provider warrants that the services will be performed in a professional manner and that the deliverables "
        "will conform materially to their specifications for ninety (90) days after delivery.",
        "Request a limited performance warranty rather than removing the disclaimer entirely.",
        ("A basic performance warranty is a reasonable expectation when paying for work.",)),
    NegotiationTemplate(
        "severability_missing", "nice-to-have",
        "If any provision of this Agreement is held invalid or unenforceable, the remaining provisions shall "
        "continue in full force and effect.",
        "Ask to add standard severability language; nobody objects to it.",
        ("Severability is boilerplate in professionally drafted contracts.",)),
)

NEGOTIATION_TEMPLATES: Dict[str, NegotiationTemplate] = {t.flag_id: t for t in _NEGOTIATION_TEMPLATES}

GENERIC_NEGOTIATION_TIP = (
    "Ask a qualified attorney to review this clause and propose balanced language before you sign."
)
GENERIC_LEVERAGE_POINTS = (
    "Balanced terms are standard practice in comparable agreements.",
    "A fair contract lowers the risk of disputes for both parties.",
)
GENERIC_PRIORITY_BY_SEVERITY = {
    "high":   "must-negotiate",
    "medium": "should-negotiate",
    "low":    "nice-to-have",
}


# ─────────────────────────────────────────────────────────────────────────────
# Extraction vocabularies
# ─────────────────────────────────────────────────────────────────────────────

PARTY_ROLES: Tuple[str, ...] = (
    "company", "contractor", "client", "employee", "employer", "landlord",
    "tenant", "licensor", "licensee", "seller", "buyer", "provider",
    "recipient", "disclosing party", "receiving party", "service provider",
)

MANDATORY_MODALS:   Tuple[str, ...] = ("shall", "must", "agrees to", "agree to", "is required to", "will")
RECOMMENDED_MODALS: Tuple[str, ...] = ("should", "may wish to", "is encouraged to")

PAYMENT_UNITS: Tuple[str, ...] = (
    "month", "year", "hour", "day", "week", "annum", "project", "milestone",
)
