"""
Tenancy assignment state.

A tenant is either Unassigned or Assigned to exactly one unit for a dated
contract. The unit id and both dates live in one immutable value so they can
never drift apart (e.g. a unit id without dates).
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Unassigned:
    """Initial state of every tenant"""


@dataclass(frozen=True)
class Assigned:
    """Tenant bound to a unit (referenced by id only) for a contract period"""

    unit_id: str
    contract_start: datetime
    contract_end: datetime


Tenancy = Unassigned | Assigned

UNASSIGNED = Unassigned()
