from .company import CompanyTools
from .filings import FilingsTools
from .financial import FinancialTools
from .insider import InsiderTools
from .search import SearchTools
from .types import ToolResponse

__all__ = ["CompanyTools", "FilingsTools", "FinancialTools", "InsiderTools", "SearchTools", "ToolResponse"]
