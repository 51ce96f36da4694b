"""Ordering bounded context — drink orders and the shared order ledger.

Handles the Order aggregate (drinks, owner, recipient, tax rate), pricing
against an external Catalogue, and the in-process ledger that collects every
order placed while the service runs.
"""

import structlog
from protean.domain import Domain

ordering = Domain(name="ordering")

logger = structlog.get_logger(__name__)
