"""
Initialize services package
"""

from .recruiter_search import build_recruiter_search_url, build_recruiter_query

__all__ = ['build_recruiter_search_url', 'build_recruiter_query']
