"""Type definitions for tool functions."""

from typing import Dict, Any, List, Optional

# Common return type for all tool functions
ToolResponse = Dict[str, Any]


def column_value(columns: Dict[str, List[Any]], key: str, index: int) -> Optional[Any]:
    """Read row ``index`` of a column-oriented submissions block; missing cells give None."""
    values = columns.get(key) or []
    return values[index] if index < len(values) else None
