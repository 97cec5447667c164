"""Validator configuration and checklist registry."""

from structure_check.config.registry import CHECKLISTS
from structure_check.config.registry import get_checklist
from structure_check.config.registry import list_checklists
from structure_check.config.validator_config import ValidatorConfig

__all__ = [
  'CHECKLISTS',
  'ValidatorConfig',
  'get_checklist',
  'list_checklists',
]
