"""
Initialize models package
"""

from .requests import ResearchRequest
from .responses import ResearchResult, ErrorResponse

__all__ = ['ResearchRequest', 'ResearchResult', 'ErrorResponse']
