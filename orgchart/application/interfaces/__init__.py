"""Application interfaces (ports): repository and listener protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from orgchart.infrastructure or orgchart.api.
"""

from orgchart.application.interfaces.repositories import IPersonRepository
from orgchart.application.interfaces.services import PersonEventListener

__all__ = [
    "IPersonRepository",
    "PersonEventListener",
]
