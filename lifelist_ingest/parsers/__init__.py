"""
Parsers sub-package for lifelist-ingest.

- tokenizer.py splits one raw export line into trimmed fields.
- lifelist.py selects the positional fields of a life-list row and
  builds an ``Observation`` from them.

Row parsing returns ``None`` for rows that should be skipped; it never
raises, so one bad line cannot abort a conversion.
"""

from lifelist_ingest.parsers.lifelist import parse_row
from lifelist_ingest.parsers.tokenizer import split_fields

__all__ = ["parse_row", "split_fields"]
