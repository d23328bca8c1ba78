"""Repositories — the persistence gateway between routes and the relational store.

Invariants:
    - Every store failure leaves this layer as an AcademiaError, never a raw SQLAlchemyError
    - Routes never build SQL; they call repository methods

Design Decisions:
    - One generic CrudRepository plus a PlanRepository for the join/aggregate reads
    - Module-level repository instances: they hold no state besides the model class
"""

from app.models import Exercise, Member
from app.repositories.crud import CrudRepository
from app.repositories.plan import PlanRepository

member_repository = CrudRepository(Member, "Member")
exercise_repository = CrudRepository(Exercise, "Exercise")
plan_repository = PlanRepository()
