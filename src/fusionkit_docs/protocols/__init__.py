"""Protocol definitions for extensible components."""

from fusionkit_docs.protocols.ingester import Ingester
from fusionkit_docs.protocols.parser import SectionParser

__all__ = ["Ingester", "SectionParser"]
