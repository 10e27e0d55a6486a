"""Matching rules for the defaultProps rewrite."""

from .styled_rules import StyledRules, styled_base
from .default_props_rules import DefaultPropsRules, is_default_props_target

__all__ = ["StyledRules", "styled_base", "DefaultPropsRules", "is_default_props_target"]
