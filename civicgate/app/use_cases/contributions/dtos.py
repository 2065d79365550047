from datetime import datetime
from enum import Enum
from typing import List, Optional
from uuid import UUID

from pydantic import Field

from civicgate.domain.base import CamelModel
from civicgate.domain.entities import TokenSubjectType


class ContributionKind(str, Enum):
    idea = "IDEA"
    incident = "INCIDENT"

    @property
    def subject_type(self) -> TokenSubjectType:
        return TokenSubjectType(self.value)

    @property
    def feature_flag(self) -> str:
        return "has_ideas" if self is ContributionKind.idea else "has_incidents"


class SubmitContributionCommand(CamelModel):
    """Validated content of a public idea or incident submission"""

    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    location: Optional[str] = Field(None, max_length=500)
    anonymous_id: Optional[str] = None


class ContributionCreatedResponse(CamelModel):
    id: UUID
    kind: ContributionKind
    status: str
    tracking_token: str


class ContributionView(CamelModel):
    id: UUID
    kind: ContributionKind
    title: str
    description: str
    status: str
    location: Optional[str] = None
    created_at: datetime


class MyContributionsResponse(CamelModel):
    ideas: List[ContributionView]
    incidents: List[ContributionView]
