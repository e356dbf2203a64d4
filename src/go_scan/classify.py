"""
Cosmetic labels for declarations: a short purpose string guessed from the
declaration name, and a development phase guessed from the file name.

Both are ordered substring rules where the first match wins. They feed the
generated prose only; nothing depends on them being right.
"""

import os
from typing import Callable

from go_scan.models.ast_models import Declaration

# --- Purpose -----------------------------------------------------------------

# (substrings of the lower-cased name, label)
PURPOSE_RULES: list[tuple[tuple[str, ...], str]] = [
    (("create",), "Creates new data"),
    (("get", "find"), "Retrieves data"),
    (("update",), "Updates existing data"),
    (("delete",), "Removes data"),
    (("new",), "Factory function"),
    (("handle",), "HTTP request handler"),
    (("validate",), "Input validation"),
    (("setup",), "Configuration function"),
    (("open",), "Opens connections"),
    (("migrate",), "Database migration"),
]
DEFAULT_PURPOSE = "General function"


def infer_purpose(name: str) -> str:
    lowered = name.lower()
    for needles, label in PURPOSE_RULES:
        if any(n in lowered for n in needles):
            return label
    return DEFAULT_PURPOSE


# --- Phase -------------------------------------------------------------------

FOUNDATION = "Foundation"
DATA_LAYER = "Data Layer"
STORE_LAYER = "Store Layer"
APPLICATION_LAYER = "Application Layer"
API_LAYER = "API Layer"
ROUTING_LAYER = "Routing Layer"
MAIN_APP = "Main App"

# Order in which a project like this is usually built.
PHASE_ORDER = [
    FOUNDATION,
    DATA_LAYER,
    STORE_LAYER,
    APPLICATION_LAYER,
    API_LAYER,
    ROUTING_LAYER,
    MAIN_APP,
]

# Predicates receive (file base name, declaration name).
PHASE_RULES: list[tuple[Callable[[str, str], bool], str]] = [
    (lambda f, n: "database" in f or "Open" in n or "Migrate" in n, FOUNDATION),
    (lambda f, n: "store" in f and "test" not in f, STORE_LAYER),
    (lambda f, n: "app" in f, APPLICATION_LAYER),
    (lambda f, n: "handler" in f, API_LAYER),
    (lambda f, n: "routes" in f, ROUTING_LAYER),
    (lambda f, n: "main" in f, MAIN_APP),
]


def determine_phase(decl: Declaration) -> str:
    """
    Labels a declaration with a development phase. `app_store.go` is a
    Store Layer file because the store rule is checked before the app rule.
    """
    file_name = os.path.basename(decl.source_file)
    for predicate, phase in PHASE_RULES:
        if predicate(file_name, decl.name):
            return phase
    return DATA_LAYER


def group_by_phase(declarations: list[Declaration]) -> dict[str, list[Declaration]]:
    """Buckets declarations by phase, in PHASE_ORDER, skipping empty phases."""
    buckets: dict[str, list[Declaration]] = {phase: [] for phase in PHASE_ORDER}
    for decl in declarations:
        buckets[determine_phase(decl)].append(decl)
    return {phase: decls for phase, decls in buckets.items() if decls}
