"""Public contribution use cases (ideas, incidents, tracking)"""

from .dtos import (
    ContributionCreatedResponse,
    ContributionKind,
    ContributionView,
    MyContributionsResponse,
    SubmitContributionCommand,
)
from .list_my_contributions_use_case import ListMyContributionsUseCase
from .submit_contribution_use_case import SubmitContributionUseCase
from .track_contribution_use_case import TrackContributionUseCase

__all__ = [
    "ListMyContributionsUseCase",
    "SubmitContributionUseCase",
    "TrackContributionUseCase",
    "ContributionCreatedResponse",
    "ContributionKind",
    "ContributionView",
    "MyContributionsResponse",
    "SubmitContributionCommand",
]
