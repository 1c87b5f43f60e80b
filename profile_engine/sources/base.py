"""Base classes for profile source connectors."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Sequence

from ..models import CompanyProfile, CompanyRef


class ProfileSource(ABC):
    """Abstract base class for a company profile source connector."""

    name: str

    @abstractmethod
    async def fetch(self, companies: Sequence[CompanyRef]) -> List[CompanyProfile]:
        """Fetch profile pages and return assembled records."""
        raise NotImplementedError
