"""
Static ATS fingerprint table

Maps each known vendor to the URL patterns of its hosted job boards and the
keywords its embeds leave behind in a page's HTML. Order matters: lookups
are first-match-in-table-order, so more widely used vendors come first.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

UNKNOWN_ATS = "Unknown / Custom ATS"


@dataclass(frozen=True)
class AtsRule:
    name: str
    url_patterns: Tuple[re.Pattern, ...]
    html_keywords: Tuple[str, ...]


def _rule(name: str, url_patterns: Iterable[str], html_keywords: Iterable[str]) -> AtsRule:
    return AtsRule(
        name=name,
        url_patterns=tuple(re.compile(p, re.IGNORECASE) for p in url_patterns),
        html_keywords=tuple(k.lower() for k in html_keywords),
    )


ATS_RULES: Tuple[AtsRule, ...] = (
    _rule("Greenhouse",
          [r"boards\.greenhouse\.io", r"job-boards\.greenhouse\.io", r"greenhouse\.io"],
          ["greenhouse"]),
    _rule("Lever", [r"jobs\.lever\.co", r"lever\.co"], ["lever.co"]),
    _rule("Workday",
          [r"myworkdayjobs\.com", r"myworkdaysite\.com", r"workday\.com"],
          ["workday"]),
    _rule("Ashby", [r"jobs\.ashbyhq\.com", r"ashbyhq\.com"], ["ashbyhq"]),
    _rule("SmartRecruiters",
          [r"jobs\.smartrecruiters\.com", r"smartrecruiters\.com"],
          ["smartrecruiters"]),
    _rule("BambooHR", [r"bamboohr\.com"], ["bamboohr"]),
    _rule("Teamtailor", [r"teamtailor\.com"], ["teamtailor"]),
    _rule("iCIMS", [r"icims\.com"], ["icims"]),
    _rule("Recruitee", [r"recruitee\.com"], ["recruitee"]),
    _rule("Pinpoint", [r"pinpointhq\.com"], ["pinpointhq"]),
    _rule("Workable", [r"apply\.workable\.com", r"workable\.com"], ["workable"]),
    _rule("JazzHR", [r"applytojob\.com", r"jazzhr\.com"], ["applytojob", "jazzhr"]),
    _rule("Breezy HR", [r"breezy\.hr"], ["breezy.hr"]),
)


def match_by_url(url: Optional[str]) -> Optional[str]:
    """Return the first vendor whose URL patterns match, in table order"""
    if not url:
        return None
    for rule in ATS_RULES:
        for pattern in rule.url_patterns:
            if pattern.search(url):
                return rule.name
    return None


def match_by_html(html: Optional[str]) -> Optional[str]:
    """Return the vendor of the first keyword found in the page, in table order"""
    if not html:
        return None
    lower_html = html.lower()
    for rule in ATS_RULES:
        for keyword in rule.html_keywords:
            if keyword in lower_html:
                return rule.name
    return None
