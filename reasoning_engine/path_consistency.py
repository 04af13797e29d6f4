"""
Path Consistency (Algebraic Closure) for RCC-5 Networks

Path consistency ensures that for all triples (i, j, k):
R(i,j) ⊆ R(i,k) ∘ R(k,j)

The engine uses it as a sanity sweep over the relations it computed for the
stored regions: relations read off real geometry always form a consistent
scenario, so an inconsistency points at a numerically fragile predicate
(near-tangent shapes, epsilon-sized gaps).

References:
- Renz & Nebel (1999) - On the Complexity of Qualitative Spatial Reasoning
- Cohn & Renz (2008) - Qualitative Spatial Representation and Reasoning
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Hashable, Optional, Set, Tuple

from qsr_base.rcc5 import COMPOSITION_TABLE, ConstraintNetwork

logger = logging.getLogger(__name__)


class ConsistencyStatus(Enum):
    """Result status of consistency checking."""
    CONSISTENT = "consistent"
    INCONSISTENT = "inconsistent"
    UNKNOWN = "unknown"  # iteration budget exhausted


@dataclass
class ConsistencyResult:
    """
    Result of a consistency check.

    Attributes:
        status: Whether the network is consistent
        refined_network: The network after constraint propagation (if consistent)
        conflict: Description of inconsistency found (if inconsistent)
        iterations: Number of propagation iterations performed
        variables_involved: Variables involved in conflict (if any)
    """
    status: ConsistencyStatus
    refined_network: Optional[ConstraintNetwork] = None
    conflict: Optional[str] = None
    iterations: int = 0
    variables_involved: Optional[Tuple[Hashable, ...]] = None

    def is_consistent(self) -> bool:
        return self.status == ConsistencyStatus.CONSISTENT


class PathConsistencyChecker:
    """
    PC-2 style path consistency over RCC-5 constraint networks.
    """

    def __init__(self, max_iterations: int = 10000):
        self.max_iterations = max_iterations
        self._composition = COMPOSITION_TABLE

    def check(self, network: ConstraintNetwork) -> ConsistencyResult:
        """
        Refine constraints until a fixed point, an empty constraint, or the
        iteration budget is reached. The input network is not modified.
        """
        working = network.copy()
        variables = sorted(working.variables)
        n = len(variables)

        if n < 3:
            return ConsistencyResult(
                status=ConsistencyStatus.CONSISTENT,
                refined_network=working,
                iterations=0
            )

        queue: Set[Tuple[Hashable, Hashable]] = set()
        for i in range(n):
            for j in range(i + 1, n):
                queue.add((variables[i], variables[j]))

        iterations = 0

        while queue and iterations < self.max_iterations:
            iterations += 1
            vi, vj = queue.pop()

            for vk in variables:
                if vk == vi or vk == vj:
                    continue

                rij = working.get_constraint(vi, vj)
                rik = working.get_constraint(vi, vk)
                rkj = working.get_constraint(vk, vj)

                refined = rij & self._composition.compose_sets(rik, rkj)

                if not refined:
                    logger.warning("Inconsistent triple (%s, %s, %s)", vi, vj, vk)
                    return ConsistencyResult(
                        status=ConsistencyStatus.INCONSISTENT,
                        conflict=f"Empty constraint derived for ({vi}, {vj}) via {vk}",
                        iterations=iterations,
                        variables_involved=(vi, vj, vk)
                    )

                if refined != rij:
                    working.set_constraint(vi, vj, refined)
                    for vm in variables:
                        if vm != vi and vm != vj:
                            queue.add((min(vi, vm), max(vi, vm)))
                            queue.add((min(vj, vm), max(vj, vm)))

        if queue:
            return ConsistencyResult(
                status=ConsistencyStatus.UNKNOWN,
                conflict="Maximum iterations exceeded",
                iterations=iterations
            )

        return ConsistencyResult(
            status=ConsistencyStatus.CONSISTENT,
            refined_network=working,
            iterations=iterations
        )
