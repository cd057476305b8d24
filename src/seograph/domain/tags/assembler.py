"""Run the rule registry and collect its descriptors in document order."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from .descriptors import flatten
from .rules import TAG_RULES

if TYPE_CHECKING:
    from collections.abc import Sequence

    from seograph.domain.model import Item, Site

    from .descriptors import TagDescriptor
    from .rules import RuleContext, TagRule


log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TagAssembler:
    """Apply every rule in declaration order and concatenate their tags."""

    context: RuleContext
    rules: Sequence[tuple[str, TagRule]] = TAG_RULES

    def assemble(self, item: Item | None, site: Site | None) -> tuple[TagDescriptor, ...]:
        descriptors: list[TagDescriptor] = []
        for name, rule in self.rules:
            contributed = flatten(rule(item, site, self.context))
            if not contributed:
                log.debug("Rule %s contributed no tags", name)
            descriptors.extend(contributed)
        log.debug(
            "Assembled %s tags for item=%s site=%s",
            len(descriptors),
            None if item is None else item.id,
            None if site is None else site.id,
        )
        return tuple(descriptors)
