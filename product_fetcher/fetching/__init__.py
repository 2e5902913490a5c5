"""
HTTP fetch collaborator for product pages.
"""

from .http_fetcher import FetchResult, HtmlFetcher

__all__ = ['FetchResult', 'HtmlFetcher']
