"""Port interfaces (Protocols).

Services depend only on these, never on concrete adapters.
No sqlite3 or other infrastructure imports allowed here.
"""

from .query_builder import QueryBuilderPort
from .record_store import RecordStorePort

__all__ = [
    "QueryBuilderPort",
    "RecordStorePort",
]
