import json
from datetime import date
from pathlib import Path
from typing import Optional

from go_scan.classify import PHASE_ORDER, group_by_phase
from go_scan.models.ast_models import Declaration, ProjectSnapshot

INVENTORY_FILE = "function_inventory.md"
STATUS_REPORT_FILE = "project_status_report.md"


def _display_name(decl: Declaration) -> str:
    return f"{decl.receiver_type}.{decl.name}" if decl.is_method and decl.receiver_type else decl.name


# --- Pretty printing & JSON export ------------------------------------------

def print_summary(snapshot: ProjectSnapshot):
    """
    Human-friendly printout of what we found.
    """
    print("\n=== PACKAGES ===")
    for pkg in sorted(snapshot.packages):
        print(f" - {pkg} ({len(snapshot.packages[pkg])} files)")

    print("\n=== FUNCTIONS ===")
    for pkg, decls in sorted(snapshot.declarations_by_package().items()):
        print(f"\n[{pkg}]")
        for d in decls:
            print(f"  - {_display_name(d)}  ({d.inferred_purpose})  @ {d.source_file}:{d.line_number}")

    if snapshot.errors:
        print("\n=== SKIPPED ===")
        for e in snapshot.errors:
            print(f"  ! {e}")


def to_json(snapshot: ProjectSnapshot) -> str:
    """
    Serializes the snapshot to JSON.
    """
    out = {
        "declarations": [
            {
                "name": d.name,
                "sourceFile": d.source_file,
                "packageName": d.package_name,
                "lineNumber": d.line_number,
                "isMethod": d.is_method,
                "receiverType": d.receiver_type,
                "inferredPurpose": d.inferred_purpose,
            }
            for d in snapshot.declarations
        ],
        "files": list(snapshot.files),
        "packages": {pkg: list(files) for pkg, files in snapshot.packages.items()},
        "errors": [
            {"kind": type(e).__name__, "path": e.path, "message": e.message}
            for e in snapshot.errors
        ],
    }
    return json.dumps(out, indent=2)


# --- Markdown reports --------------------------------------------------------

def render_function_inventory(snapshot: ProjectSnapshot) -> str:
    lines = [
        "# Function Inventory - Auto-Generated",
        "",
        "This document lists every function currently defined in the project.",
        "",
    ]
    for pkg, decls in sorted(snapshot.declarations_by_package().items()):
        lines.append(f"## Package: {pkg}")
        lines.append("")
        lines.append(f"**Files:** {len(snapshot.packages.get(pkg, []))}  |  **Functions:** {len(decls)}")
        lines.append("")
        for d in sorted(decls, key=lambda d: d.name):
            entry = f"- **{d.name}**"
            if d.is_method:
                entry += f" (method on {d.receiver_type})"
            lines.append(f"{entry} - {d.inferred_purpose}")
            lines.append(f"  - File: `{d.source_file}` (line {d.line_number})")
        lines.append("")

    lines += [
        "## Summary",
        "",
        f"- **Total Functions:** {len(snapshot.declarations)}",
        f"- **Total Files:** {len(snapshot.files)}",
        f"- **Total Packages:** {len(snapshot.packages)}",
    ]
    return "\n".join(lines) + "\n"


def render_status_report(snapshot: ProjectSnapshot, generated: Optional[date] = None) -> str:
    generated = generated or date.today()
    lines = [
        "# Project Status Report - Auto-Generated",
        "",
        f"**Generated:** {generated.isoformat()}",
        "",
        "## Project Statistics",
        "",
        f"- **Total Functions:** {len(snapshot.declarations)}",
        f"- **Total Files:** {len(snapshot.files)}",
        f"- **Total Packages:** {len(snapshot.packages)}",
        "",
        "## Package Breakdown",
        "",
    ]
    for pkg in sorted(snapshot.packages):
        lines.append(f"- **{pkg}:** {len(snapshot.packages[pkg])} files")

    lines += ["", "## Development Phases", ""]
    phases = group_by_phase(snapshot.declarations)
    for phase in PHASE_ORDER:
        if phase in phases:
            lines.append(f"- **{phase}:** {len(phases[phase])} functions")

    if snapshot.errors:
        lines += ["", "## Skipped Files", ""]
        lines += [f"- `{e.path}`: {e.message}" for e in snapshot.errors]
    return "\n".join(lines) + "\n"


def write_function_inventory(out_dir, snapshot: ProjectSnapshot) -> Path:
    path = Path(out_dir) / INVENTORY_FILE
    path.write_text(render_function_inventory(snapshot), encoding="utf-8")
    return path


def write_status_report(out_dir, snapshot: ProjectSnapshot, generated: Optional[date] = None) -> Path:
    path = Path(out_dir) / STATUS_REPORT_FILE
    path.write_text(render_status_report(snapshot, generated), encoding="utf-8")
    return path


def write_reports(out_dir, snapshot: ProjectSnapshot) -> list[Path]:
    """Writes both Markdown reports, creating out_dir if needed."""
    Path(out_dir).mkdir(parents=True, exist_ok=True)
    return [
        write_function_inventory(out_dir, snapshot),
        write_status_report(out_dir, snapshot),
    ]
