"""Application services layer (fetch pipeline, application state).

Services coordinate the domain and infrastructure layers. They should avoid UI
concerns; collaborators are passed in at construction so tests can swap them.
"""

from simplemed.services.data_service import DataService
from simplemed.services.scan_store import ScanStore

__all__ = ["DataService", "ScanStore"]
