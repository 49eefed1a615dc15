"""Rule execution priorities for Spanish.

When two rules flag overlapping text, the match of the rule with the higher
priority is kept. Identifiers without an explicit entry fall back to the
base-language default, which is 0 for anything it does not recognise.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Iterable, Mapping

PriorityFallback = Callable[[str], int]


def _build_table(pairs: Iterable[tuple[str, int]]) -> Mapping[str, int]:
    table: dict[str, int] = {}
    for rule_id, priority in pairs:
        if rule_id in table:
            raise ValueError(f"Duplicate priority entry for rule {rule_id!r}")
        table[rule_id] = int(priority)
    return MappingProxyType(table)


SPANISH_RULE_PRIORITIES: Mapping[str, int] = _build_table(
    [
        ("CONFUSIONS2", 50),  # greater than CONFUSIONS
        ("TE_TILDE", 50),
        ("PLURAL_SEPARADO", 50),
        ("INCORRECT_EXPRESSIONS", 40),
        ("MISSPELLING", 40),
        ("CONFUSIONS", 40),
        ("NO_SEPARADO", 40),
        ("DIACRITICS", 30),
        ("POR_CIERTO", 30),
        ("LO_LOS", 30),
        ("SE_CREO", 25),  # less than DIACRITICS_VERB_N_ADJ
        ("PRONOMBRE_SIN_VERBO", 25),
        ("AGREEMENT_DET_ABREV", 25),  # greater than AGREEMENT_DET_NOUN
        ("MUCHO_NF", 25),  # greater than AGREEMENT_DET_NOUN
        ("AGREEMENT_DET_NOUN", 20),
        ("AGREEMENT_DET_ADJ", 10),
        ("TYPOGRAPHY", 10),
        ("HALLA_HAYA", 10),
        ("VALLA_VAYA", 10),
        ("ES_SIMPLE_REPLACE", 10),
        ("SEPARADO", 1),
        ("E_EL", -10),
        ("EL_TILDE", -10),
        ("TOO_LONG_PARAGRAPH", -15),
        ("PREP_VERB", -20),
        ("SUBJUNTIVO_FUTURO", -30),
        ("SUBJUNTIVO_PASADO", -30),
        ("SUBJUNTIVO_PASADO2", -30),
        ("AGREEMENT_ADJ_NOUN", -30),
        ("AGREEMENT_PARTICIPLE_NOUN", -30),
        ("AGREEMENT_POSTPONED_ADJ", -30),
        ("VOSEO", -40),
        ("MORFOLOGIK_RULE_ES", -100),
        ("UPPERCASE_SENTENCE_START", -200),
    ]
)

# Priorities every language inherits from the base profile. Style rules sit
# below grammar so that grammar corrections are shown first.
BASE_PRIORITIES: Mapping[str, int] = _build_table([("STYLE", -50)])


def base_priority_for_id(rule_id: str) -> int:
    """Default priority of the base language profile."""
    return BASE_PRIORITIES.get(rule_id, 0)


class PriorityResolver:
    """Resolve the execution priority of a rule or category identifier."""

    def __init__(
        self,
        table: Mapping[str, int],
        fallback: PriorityFallback = base_priority_for_id,
    ) -> None:
        self._table = MappingProxyType(dict(table))
        self._fallback = fallback

    @property
    def table(self) -> Mapping[str, int]:
        return self._table

    def priority_of(self, rule_id: str) -> int:
        """Return the priority for ``rule_id``; never raises.

        Lookup is exact and case-sensitive. Unknown identifiers are delegated
        to the fallback, and a fallback that yields nothing counts as 0.
        """
        if rule_id in self._table:
            return self._table[rule_id]
        return self._fallback(rule_id) or 0

    def rule_priority(self, rule_id: str, category_id: str | None = None) -> int:
        """Priority of a rule, falling back to its category.

        A non-zero rule priority takes precedence over the category priority.
        """
        priority = self.priority_of(rule_id)
        if priority != 0 or not category_id:
            return priority
        return self.priority_of(category_id)
