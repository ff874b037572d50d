"""
Company hiring research

Multi-layer fallback approach:
1. Careers page: path probes → homepage ATS links → homepage careers links
2. ATS: careers URL → page HTML → outbound ATS link
3. Live roles: platform APIs (Greenhouse, Lever, Ashby, ...) → HTML selectors → job links
"""

from .researcher import ProspectResearcher
from .exceptions import ResearchError, InvalidInputError, FetchError, ParseError

__all__ = ['ProspectResearcher', 'ResearchError', 'InvalidInputError', 'FetchError', 'ParseError']
