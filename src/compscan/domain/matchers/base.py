"""Matcher type aliases."""

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from compscan.domain.model.type_info import TypeInfo

# Pure predicate over one compiled type
TypeMatcher = Callable[["TypeInfo"], bool]
