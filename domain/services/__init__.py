"""
Domain services containing pure business logic.
"""

from domain.services.draft_service import DraftService
from domain.services.formation_service import FormationService
from domain.services.result_assembler import ResultAssembler
from domain.services.role_assignment_service import RoleAssignmentService
from domain.services.team_balancing_service import TeamBalancingService

__all__ = [
    "DraftService",
    "FormationService",
    "ResultAssembler",
    "RoleAssignmentService",
    "TeamBalancingService",
]
