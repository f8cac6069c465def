"""Catalog and configuration command handlers for the interface layer."""
from __future__ import annotations

import importlib
import inspect
from typing import Any, Dict, Optional

from src.config.manager import ConfigurationManager
from src.infrastructure.registry.pattern_registry import PatternCategory, PatternRegistry


def handle_list_patterns(registry: PatternRegistry, category: Optional[str] = None) -> Dict[str, Any]:
    """
    Handle ``patterns list``.

    Args:
        registry: Pattern catalog
        category: Optional category filter ('creational' or 'structural')

    Returns:
        Patterns in catalog order
    """
    selected = PatternCategory(category) if category else None
    patterns = [registration.to_dict() for registration in registry.list_patterns(selected)]
    return {"patterns": patterns, "count": len(patterns)}


def handle_show_pattern(registry: PatternRegistry, name: str) -> Dict[str, Any]:
    """Handle ``patterns show``: catalog entry plus the pattern module's documentation."""
    registration = registry.get_registration(name)
    result = registration.to_dict()
    result["module"] = registration.module
    result["description"] = ""
    if registration.module:
        module = importlib.import_module(registration.module)
        result["description"] = inspect.getdoc(module) or ""
    return {"pattern": result}


def handle_show_config(config_manager: ConfigurationManager) -> Dict[str, Any]:
    """Handle ``config show``."""
    return {"config_file": config_manager.config_file, "config": config_manager.to_dict()}


def handle_validate_config(config_file: Optional[str] = None,
                           config_manager: Optional[ConfigurationManager] = None) -> Dict[str, Any]:
    """
    Handle ``config validate``.

    Raises:
        ConfigurationError: If the configuration cannot be loaded or is invalid
    """
    manager = ConfigurationManager(config_file) if config_file else config_manager
    if manager is None:
        manager = ConfigurationManager()
    manager.get_typed()
    return {"valid": True, "config_file": manager.config_file, "message": "Configuration is valid"}
