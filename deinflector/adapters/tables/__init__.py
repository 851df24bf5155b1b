from .loader import JsonTableSource, descriptor_from_table, parse_table
from .schema import TransformTable

__all__ = ["JsonTableSource", "TransformTable", "descriptor_from_table", "parse_table"]
