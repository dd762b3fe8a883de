"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (person repository).
"""

from orgchart.application.interfaces import IPersonRepository, PersonEventListener
from orgchart.application.services import ChainResolver, TreeBuilder
from orgchart.application.use_cases import HierarchyService, PersonService

__all__ = [
    "ChainResolver",
    "HierarchyService",
    "IPersonRepository",
    "PersonEventListener",
    "PersonService",
    "TreeBuilder",
]
