"""
Fixed keyword and pattern tables.

All matching against these tables is case-insensitive substring containment
unless a table holds regular expressions.
"""
from dataclasses import dataclass
from typing import Dict, List, Pattern
import re

from prospect_intel.schemas import SignalType


# ----------------------------------------------------------------------------
# Expertise areas
# ----------------------------------------------------------------------------

TALENT_MANAGEMENT_KEYWORDS = [
    "talent management", "talent acquisition", "talent retention",
    "succession planning", "performance management", "employee engagement",
    "workforce planning", "talent strategy", "talent development",
    "human capital",
]

PEOPLE_DEVELOPMENT_KEYWORDS = [
    "people development", "leadership development", "employee development",
    "coaching", "mentoring", "training", "learning and development",
    "career development", "skill development", "upskilling", "reskilling",
]

HR_TECHNOLOGY_KEYWORDS = [
    "hr technology", "hris", "ats", "people analytics", "workforce analytics",
    "hr automation", "employee experience platform",
    "performance management system", "applicant tracking", "hr analytics",
    "hr software",
]

LEADERSHIP_KEYWORDS = [
    "leadership", "executive coaching", "team building", "culture change",
    "change management", "organizational development", "strategy", "vision",
]

EXPERTISE_AREAS: Dict[str, List[str]] = {
    "talent_management": TALENT_MANAGEMENT_KEYWORDS,
    "people_development": PEOPLE_DEVELOPMENT_KEYWORDS,
    "hr_technology": HR_TECHNOLOGY_KEYWORDS,
    "leadership": LEADERSHIP_KEYWORDS,
}

# Topic relevance only looks at the three HR areas
TOPIC_KEYWORDS = (
    TALENT_MANAGEMENT_KEYWORDS + PEOPLE_DEVELOPMENT_KEYWORDS + HR_TECHNOLOGY_KEYWORDS
)


# ----------------------------------------------------------------------------
# Profile dimensions (enhanced profile tables)
# ----------------------------------------------------------------------------

ROLE_PATTERNS = [
    {"name": "ceo", "patterns": ["ceo", "chief executive", "managing director", "president"], "weight": 100},
    {"name": "founder", "patterns": ["founder", "co-founder", "founding"], "weight": 100},
    {"name": "coo", "patterns": ["coo", "chief operating", "operations director"], "weight": 90},
    {"name": "vp", "patterns": ["vp", "vice president", "svp", "senior vice president"], "weight": 85},
    {"name": "director", "patterns": ["director", "head of", "division head"], "weight": 75},
    {"name": "manager", "patterns": ["manager", "senior manager", "general manager"], "weight": 50},
]

INDUSTRY_PATTERNS = [
    {"name": "tech", "patterns": ["technology", "software", "saas", "tech", "ai",
                                  "artificial intelligence", "cloud",
                                  "digital transformation", "fintech"], "weight": 100},
    {"name": "consulting", "patterns": ["consulting", "advisory", "professional services",
                                        "management consulting"], "weight": 90},
    {"name": "finance", "patterns": ["financial", "banking", "investment", "fintech", "capital",
                                     "private equity", "venture capital"], "weight": 90},
    {"name": "healthcare", "patterns": ["healthcare", "biotech", "pharmaceutical", "medical",
                                        "health tech"], "weight": 80},
    {"name": "manufacturing", "patterns": ["manufacturing", "industrial", "supply chain",
                                           "logistics"], "weight": 70},
]

COMPANY_SIZE_PATTERNS = [
    {"name": "enterprise", "patterns": ["fortune 500", "global", "enterprise", "multinational",
                                        "1000+", "large scale"], "weight": 100},
    {"name": "midmarket", "patterns": ["mid-market", "regional", "100-1000", "growing",
                                       "scale-up"], "weight": 85},
    {"name": "startup", "patterns": ["startup", "early stage", "series a", "series b",
                                     "scale-up"], "weight": 90},
    {"name": "smb", "patterns": ["small business", "local", "family business"], "weight": 60},
]

TRANSITION_PATTERNS = [
    {"name": "new_role", "patterns": ["new role", "recently joined", "just started",
                                      "new position"], "weight": 95},
    {"name": "promotion", "patterns": ["promoted", "promoted to", "new ceo", "appointed"], "weight": 90},
    {"name": "career_change", "patterns": ["career change", "pivot", "transition"], "weight": 85},
]

LEADERSHIP_RELEVANCE_PATTERNS = [
    {"name": "high", "patterns": ["leadership development", "executive coaching", "transformation",
                                  "culture change", "team building", "scaling",
                                  "growth mindset"], "weight": 90},
    {"name": "medium", "patterns": ["leadership", "management", "strategy", "vision", "culture",
                                    "people"], "weight": 60},
    {"name": "low", "patterns": ["leader", "manage", "team"], "weight": 45},
]

RED_FLAG_PATTERNS = [
    {"name": "retired", "patterns": ["retired", "former", "ex-", "previously"]},
    {"name": "seeking", "patterns": ["seeking opportunities", "looking for", "open to work",
                                     "available"]},
    {"name": "student", "patterns": ["student", "intern", "graduate", "mba candidate"]},
    {"name": "consultant_individual", "patterns": ["freelance", "independent consultant",
                                                   "sole proprietor"]},
]

# Any of these in the role text forces the role score to 0
ROLE_EXCLUDE_KEYWORDS = [
    "retired", "former", "ex-", "seeking opportunities", "between roles",
    "open to work", "student", "freelance", "independent consultant",
    "sole proprietor",
]


# ----------------------------------------------------------------------------
# Profile dimensions (standard profile tables)
# ----------------------------------------------------------------------------

STANDARD_ROLE_PATTERNS = [
    {"name": "ceo", "patterns": ["ceo", "chief executive", "president", "managing director"], "weight": 100},
    {"name": "founder", "patterns": ["founder", "co-founder"], "weight": 100},
    {"name": "executive", "patterns": ["coo", "vp", "svp", "vice president", "division head",
                                       "gm", "general manager"], "weight": 90},
    {"name": "director", "patterns": ["director", "head of"], "weight": 70},
]

STANDARD_INDUSTRY_PATTERNS = [
    {"name": "technology", "patterns": ["technology", "software", "saas", "tech", "ai", "cloud",
                                        "digital"], "weight": 100},
    {"name": "professional_services", "patterns": ["consulting", "professional services",
                                                   "financial", "banking", "investment"], "weight": 90},
    {"name": "other_target", "patterns": ["manufacturing", "healthcare", "biotech",
                                          "e-commerce", "retail"], "weight": 80},
]

STANDARD_COMPANY_SIZE_PATTERNS = [
    {"name": "enterprise", "patterns": ["enterprise", "fortune", "global"], "weight": 100},
    {"name": "midmarket", "patterns": ["mid-market", "regional"], "weight": 90},
]

STANDARD_TRANSITION_KEYWORDS = [
    "new role", "recently joined", "promoted", "new position", "starting",
]

STANDARD_LEADERSHIP_KEYWORDS = [
    "leadership", "transformation", "growth", "scale", "team building", "strategy",
]


# ----------------------------------------------------------------------------
# Authority rules
# ----------------------------------------------------------------------------

@dataclass(frozen=True)
class AuthorityRule:
    """One ordered regex rule that turns a phrase into a Signal."""
    pattern: Pattern
    type: SignalType
    confidence: int
    label: str


def _rule(regex: str, signal_type: SignalType, confidence: int, label: str) -> AuthorityRule:
    return AuthorityRule(re.compile(regex, re.IGNORECASE), signal_type, confidence, label)


LINKEDIN_AUTHORITY_RULES = [
    _rule(r"in my (\d+\+?\s?)years? of experience", SignalType.EXPERIENCE, 90, "Stated Experience"),
    _rule(r"I (implemented|led|developed|created)", SignalType.EXPERIENCE, 85, "Hands-on Delivery"),
    _rule(r"(achieved|increased|improved|reduced).+?(\d+%)", SignalType.RESULTS, 95, "Measured Results"),
    _rule(r"case study|real example|actual implementation", SignalType.CASE_STUDY, 80, "Case Study"),
    _rule(r"I spoke at|I presented|keynote|conference speaker", SignalType.SPEAKING, 85, "Speaking"),
    _rule(r"framework|methodology|approach I use", SignalType.METHODOLOGY, 75, "Methodology"),
    _rule(r"companies I('ve| have) worked with", SignalType.EXPERIENCE, 80, "Client Experience"),
    _rule(r"my clients|organizations I('ve| have) helped", SignalType.EXPERIENCE, 85, "Client Experience"),
]

WEB_AUTHORITY_RULES = [
    _rule(r"in my experience", SignalType.EXPERIENCE, 85, "Personal Experience"),
    _rule(r"I have (helped|worked with|implemented)", SignalType.EXPERIENCE, 90, "Direct Implementation"),
    _rule(r"our (team|company|organization) (achieved|increased|improved)", SignalType.RESULTS, 95,
          "Proven Results"),
    _rule(r"I spoke at|I presented at", SignalType.SPEAKING, 80, "Conference Speaker"),
    _rule(r"case study|real example|actual implementation", SignalType.CASE_STUDY, 75,
          "Practical Examples"),
    _rule(r"\d+% (increase|improvement|reduction)", SignalType.RESULTS, 85, "Quantified Results"),
]


# ----------------------------------------------------------------------------
# Content helpers
# ----------------------------------------------------------------------------

ORIGINAL_THINKING_PHRASES = [
    "in my opinion", "i believe", "my approach", "i've found",
    "here's what i learned", "my experience shows",
]

FRAMEWORKS = [
    "OKRs", "KPIs", "SMART goals", "9-box grid", "competency model",
    "succession planning", "talent pipeline", "employee journey mapping",
    "performance management framework", "engagement survey",
]

TOOLS = [
    "Workday", "SuccessFactors", "BambooHR", "ADP", "Cornerstone OnDemand",
    "Greenhouse", "Lever", "Workable", "Culture Amp", "Glint", "Lattice",
    "LinkedIn Talent Insights", "Tableau", "Power BI",
]

HR_CERTIFICATIONS = ["SHRM-CP", "SHRM-SCP", "PHR", "SPHR", "GPHR"]

HR_ROLE_TERMS = ["hr", "human resources", "talent", "people", "chro", "director", "vp"]
SENIOR_TERMS = ["director", "vp", "chief", "head of", "senior"]

HR_SKILLS = [
    "talent acquisition", "performance management", "employee engagement",
    "succession planning", "compensation", "benefits", "hris", "analytics",
]

ARTICLE_URL_PATTERNS = [
    re.compile(p, re.IGNORECASE) for p in (
        r"blog", r"article", r"post", r"news", r"insights",
        r"linkedin\.com/pulse", r"medium\.com", r"forbes\.com",
        r"hbr\.org", r"shrm\.org", r"hrexecutive\.com",
    )
]
