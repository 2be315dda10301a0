"""Technology name resolution."""

from .aliases import ALIAS_RULES, AliasRule, build_alias_index
from .name_resolver import NameResolver, get_resolver

__all__ = ["ALIAS_RULES", "AliasRule", "NameResolver", "build_alias_index", "get_resolver"]
