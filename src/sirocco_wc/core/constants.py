"""Shared constants for sirocco-wc project layout and templates."""

from __future__ import annotations

GENERATOR_NAME = "sirocco-wc"

STAGING_DIR = "tmp"
VARIABLES_FILE = "_variables.yaml"
GITIGNORE_TEMPLATE = "_.gitignore"
GITIGNORE = ".gitignore"
PROJECT_CONFIG_FILE = ".sirocco.yaml"
TAILWIND_CONFIG_FILE = "tailwind.config.js"

# Staging-relative path prefixes that are copied but never rewritten
EXCLUDED_PREFIXES: tuple[str, ...] = ("node_modules", "dist")

TEMPLATE_ROOT_ENV_VAR = "SIROCCO_TEMPLATE_ROOT"

__all__ = [
    "EXCLUDED_PREFIXES",
    "GENERATOR_NAME",
    "GITIGNORE",
    "GITIGNORE_TEMPLATE",
    "PROJECT_CONFIG_FILE",
    "STAGING_DIR",
    "TAILWIND_CONFIG_FILE",
    "TEMPLATE_ROOT_ENV_VAR",
    "VARIABLES_FILE",
]
