from .client import EdgarClient
from .models import CompanyMatch, FilingDocument, FilingInfo, InsiderFilingInfo
from .rate_limiter import RateLimiter

__all__ = ["EdgarClient", "RateLimiter", "CompanyMatch", "FilingDocument", "FilingInfo", "InsiderFilingInfo"]
