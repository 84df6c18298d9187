# tests/arch/test_layering.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Layering guardrail for `arche_daterange`, checked over the grimp import graph.

Every top-level subpackage is a layer, `config` and `dependencies` included:

    domain         → domain
    config         → {domain, config}          (Settings types its fields with domain enums)
    application    → {domain, config, application}
    adapters       → {domain, application, adapters}
    infrastructure → {config, infrastructure}
    dependencies   → anything                  (composition root)

Consequences worth stating explicitly:

    * domain never sees Settings, so pydantic-settings stays out of the core.
    * only `dependencies` may import `infrastructure`, so it is the one place
      where logging setup and the use cases meet.

If you change layering rules, update this file and the layer table in DESIGN.md.
"""

from __future__ import annotations

from collections.abc import Mapping, Set
from typing import Final

import grimp

ROOT_PACKAGE: Final[str] = "arche_daterange"

LAYERS: Final[frozenset[str]] = frozenset(
    {"domain", "config", "application", "adapters", "infrastructure", "dependencies"}
)

ALLOWED_DEPENDENCIES: Mapping[str, Set[str]] = {
    "domain": {"domain"},
    "config": {"domain", "config"},
    "application": {"domain", "config", "application"},
    "adapters": {"domain", "application", "adapters"},
    "infrastructure": {"config", "infrastructure"},
    "dependencies": LAYERS,
}


def _layer_for_module(module_name: str) -> str | None:
    """Return the layer a module belongs to, or None for the package root and foreign modules."""
    prefix = f"{ROOT_PACKAGE}."
    if not module_name.startswith(prefix):
        return None
    top = module_name[len(prefix) :].split(".", 1)[0]
    return top if top in LAYERS else None


def _direct_imports() -> dict[str, set[str]]:
    """Map every module of the package to the package modules it imports directly."""
    graph = grimp.build_graph(ROOT_PACKAGE)
    return {
        importer: {
            imported
            for imported in graph.find_modules_directly_imported_by(importer)
            if imported.startswith(f"{ROOT_PACKAGE}.")
        }
        for importer in graph.modules
        if importer.startswith(f"{ROOT_PACKAGE}.")
    }


def _find_layering_violations(imports: Mapping[str, Set[str]]) -> list[str]:
    violations: set[str] = set()
    for importer, imported_modules in imports.items():
        importer_layer = _layer_for_module(importer)
        if importer_layer is None:
            continue
        for imported in imported_modules:
            imported_layer = _layer_for_module(imported)
            if imported_layer is None or imported_layer in ALLOWED_DEPENDENCIES[importer_layer]:
                continue
            violations.add(f"{importer} ({importer_layer}) -> {imported} ({imported_layer})")
    return sorted(violations)


def test_every_subpackage_is_a_known_layer() -> None:
    unknown = {
        module
        for module in _direct_imports()
        if module.count(".") == 1 and _layer_for_module(module) is None
    }

    assert not unknown, f"Subpackages outside the layer matrix: {sorted(unknown)}"


def test_layering_respects_layer_matrix() -> None:
    violations = _find_layering_violations(_direct_imports())

    if violations:
        raise AssertionError("Layering violations detected:\n" + "\n".join(violations))


def test_matrix_rejects_domain_reaching_for_settings() -> None:
    imports = {
        "arche_daterange.domain.services.time_offset": {"arche_daterange.config.settings"},
        "arche_daterange.domain.entities.range_value": {"arche_daterange.dependencies.bootstrap"},
    }

    assert _find_layering_violations(imports) == [
        "arche_daterange.domain.entities.range_value (domain) -> "
        "arche_daterange.dependencies.bootstrap (dependencies)",
        "arche_daterange.domain.services.time_offset (domain) -> "
        "arche_daterange.config.settings (config)",
    ]


def test_matrix_keeps_infrastructure_behind_the_composition_root() -> None:
    imports = {
        "arche_daterange.application.use_cases.apply_pending_range": {
            "arche_daterange.infrastructure.logging.logger"
        },
        "arche_daterange.adapters.schemas.range_value": {
            "arche_daterange.infrastructure.logging.logger"
        },
        "arche_daterange.dependencies.bootstrap": {
            "arche_daterange.infrastructure.logging.logger",
            "arche_daterange.application.use_cases.apply_pending_range",
        },
    }

    violations = _find_layering_violations(imports)

    assert len(violations) == 2
    assert not any(v.startswith("arche_daterange.dependencies") for v in violations)
