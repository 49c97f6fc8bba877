"""Subject repository interface."""

from abc import ABC, abstractmethod

from vouch.domain.model.subject import Subject
from vouch.domain.value import DomainType, SubjectId


class SubjectRepository(ABC):
    """Read access to the records invitations are about.

    Each domain keeps its subjects in its own table; implementations map the
    domain to the right source explicitly.
    """

    @abstractmethod
    async def find_by_id(self, domain: DomainType, subject_id: SubjectId) -> Subject | None:
        """Find a subject by domain and ID.

        Args:
            domain: Subject domain (not CONNECTION)
            subject_id: Subject identifier

        Returns:
            The subject if found, None otherwise
        """
        pass
