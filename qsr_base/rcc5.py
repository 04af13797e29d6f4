"""
RCC-5 (Region Connection Calculus) Implementation

This module implements the RCC-5 calculus used to describe the topological
relation between two stored regions. RCC-5 is the coarsening of RCC-8 that
does not distinguish boundary contact: EC collapses into DR and the
tangential/non-tangential proper parts collapse into PP/PPI.

References:
- Randell, Cui & Cohn (1992) - A Spatial Logic based on Regions and Connection
- Bennett (1994) - Spatial Reasoning with Propositional Logics
- Jonsson & Drakengren (1997) - A Complete Classification of Tractability in RCC-5

The 5 base relations are:
- DR: Discrete (disjoint interiors)
- PO: Partial Overlap
- EQ: Equal
- PP: Proper Part
- PPI: Proper Part inverse
"""

from enum import Enum, auto
from typing import Set, Dict, Tuple, FrozenSet, Hashable
from itertools import product


class RCC5Relation(Enum):
    """
    The 5 base relations of RCC-5.
    These are jointly exhaustive and pairwise disjoint (JEPD).
    """
    DR = auto()   # Discrete
    PO = auto()   # Partial Overlap
    EQ = auto()   # Equal
    PP = auto()   # Proper Part
    PPI = auto()  # Proper Part inverse

    def __repr__(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name

    @classmethod
    def all_relations(cls) -> FrozenSet['RCC5Relation']:
        """Return all 5 base relations."""
        return frozenset(cls)

    def inverse(self) -> 'RCC5Relation':
        """Return the converse/inverse relation."""
        inverses = {
            RCC5Relation.DR: RCC5Relation.DR,
            RCC5Relation.PO: RCC5Relation.PO,
            RCC5Relation.EQ: RCC5Relation.EQ,
            RCC5Relation.PP: RCC5Relation.PPI,
            RCC5Relation.PPI: RCC5Relation.PP,
        }
        return inverses[self]


# Type alias for constraint sets (disjunctions of base relations)
RelationSet = FrozenSet[RCC5Relation]


def relation_set(*relations: RCC5Relation) -> RelationSet:
    """Create a relation set from given relations."""
    return frozenset(relations)


# Universal relation (any of the 5)
UNIVERSAL = frozenset(RCC5Relation)

# Empty relation (inconsistent)
EMPTY = frozenset()


class RCC5CompositionTable:
    """
    Composition table for RCC-5 relations.

    The composition r1 ; r2 gives the possible relations between X and Z
    when X r1 Y and Y r2 Z.
    """

    def __init__(self):
        self._table: Dict[Tuple[RCC5Relation, RCC5Relation], RelationSet] = {}
        self._build_table()

    def _build_table(self):
        DR = RCC5Relation.DR
        PO = RCC5Relation.PO
        EQ = RCC5Relation.EQ
        PP = RCC5Relation.PP
        PPI = RCC5Relation.PPI

        self._table = {
            (DR, DR): UNIVERSAL,
            (DR, PO): relation_set(DR, PO, PP),
            (DR, EQ): relation_set(DR),
            (DR, PP): relation_set(DR, PO, PP),
            (DR, PPI): relation_set(DR),

            (PO, DR): relation_set(DR, PO, PPI),
            (PO, PO): UNIVERSAL,
            (PO, EQ): relation_set(PO),
            (PO, PP): relation_set(PO, PP),
            (PO, PPI): relation_set(DR, PO, PPI),

            (EQ, DR): relation_set(DR),
            (EQ, PO): relation_set(PO),
            (EQ, EQ): relation_set(EQ),
            (EQ, PP): relation_set(PP),
            (EQ, PPI): relation_set(PPI),

            (PP, DR): relation_set(DR),
            (PP, PO): relation_set(DR, PO, PP),
            (PP, EQ): relation_set(PP),
            (PP, PP): relation_set(PP),
            (PP, PPI): UNIVERSAL,

            (PPI, DR): relation_set(DR, PO, PPI),
            (PPI, PO): relation_set(PO, PPI),
            (PPI, EQ): relation_set(PPI),
            (PPI, PP): relation_set(PO, EQ, PP, PPI),
            (PPI, PPI): relation_set(PPI),
        }

    def compose(self, r1: RCC5Relation, r2: RCC5Relation) -> RelationSet:
        """
        Get the composition of two base relations.

        Args:
            r1: First relation (X r1 Y)
            r2: Second relation (Y r2 Z)

        Returns:
            Set of possible relations between X and Z
        """
        return self._table.get((r1, r2), EMPTY)

    def compose_sets(self, s1: RelationSet, s2: RelationSet) -> RelationSet:
        """Weak composition of two relation sets (union of base compositions)."""
        result: Set[RCC5Relation] = set()
        for r1, r2 in product(s1, s2):
            result.update(self.compose(r1, r2))
        return frozenset(result)


# Global composition table instance
COMPOSITION_TABLE = RCC5CompositionTable()



def format_relations(relations: RelationSet) -> str:
    """Render a relation set as ``{PO, PP}`` in a stable order."""
    return '{' + ', '.join(str(r) for r in sorted(relations, key=lambda x: x.value)) + '}'


class ConstraintNetwork:
    """
    A constraint network over RCC-5 relations.

    Variables are shape ids; unconstrained pairs default to UNIVERSAL.
    """

    def __init__(self):
        self._variables: Set[Hashable] = set()
        self._constraints: Dict[Tuple[Hashable, Hashable], RelationSet] = {}

    @property
    def variables(self) -> Set[Hashable]:
        """Get all variables in the network."""
        return self._variables.copy()

    @property
    def num_variables(self) -> int:
        return len(self._variables)

    def add_variables(self, *names: Hashable) -> None:
        self._variables.update(names)

    def add_constraint(self, var1: Hashable, var2: Hashable, relations: RelationSet) -> bool:
        """
        Add or refine a constraint between two variables.

        Returns:
            True if constraint was added/refined successfully,
            False if it results in inconsistency
        """
        self._variables.add(var1)
        self._variables.add(var2)

        if var1 > var2:
            var1, var2 = var2, var1
            relations = frozenset(r.inverse() for r in relations)

        key = (var1, var2)

        if key in self._constraints:
            relations = self._constraints[key] & relations
            if not relations:
                return False

        self._constraints[key] = relations
        return True

    def set_constraint(self, var1: Hashable, var2: Hashable, relations: RelationSet) -> None:
        """Overwrite the constraint between two variables without intersecting."""
        if var1 > var2:
            var1, var2 = var2, var1
            relations = frozenset(r.inverse() for r in relations)
        self._constraints[(var1, var2)] = relations

    def get_constraint(self, var1: Hashable, var2: Hashable) -> RelationSet:
        """
        Get the constraint between two variables.

        Returns UNIVERSAL if no specific constraint exists.
        """
        if var1 > var2:
            key = (var2, var1)
            if key in self._constraints:
                return frozenset(r.inverse() for r in self._constraints[key])
            return UNIVERSAL

        return self._constraints.get((var1, var2), UNIVERSAL)

    def copy(self) -> 'ConstraintNetwork':
        new_network = ConstraintNetwork()
        new_network._variables = self._variables.copy()
        new_network._constraints = self._constraints.copy()
        return new_network

    def __repr__(self) -> str:
        lines = [f"ConstraintNetwork with {len(self._variables)} variables:"]
        for (v1, v2), rels in sorted(self._constraints.items()):
            lines.append(f"  {v1} {format_relations(rels)} {v2}")
        return '\n'.join(lines)
