"""
Recruiter X-ray search - Google query for LinkedIn profiles of a company's recruiters
"""

from urllib.parse import quote

SEARCH_ENDPOINT = "https://www.google.com/search"

RECRUITER_TITLES = [
    "recruiter",
    "talent acquisition",
    "head of recruitment",
    "recruitment manager",
    "TA lead",
    "talent lead",
    "head of people",
    "VP talent",
]


def build_recruiter_query(company_name: str) -> str:
    titles = " OR ".join(f'"{title}"' for title in RECRUITER_TITLES)
    return f'site:linkedin.com/in/ "{company_name}" ({titles})'


def build_recruiter_search_url(company_name: str) -> str:
    """
    Google search URL for LinkedIn profiles mentioning the company
    alongside a recruiting title
    """
    return f"{SEARCH_ENDPOINT}?q={quote(build_recruiter_query(company_name), safe='')}"
