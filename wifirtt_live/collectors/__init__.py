from .arp import fetch_address_table, parse_address_table
from .scan import fetch_scan

__all__ = ["fetch_address_table", "fetch_scan", "parse_address_table"]
