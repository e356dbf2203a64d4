# --- Data models for the scan result ----------------------------------------
from dataclasses import dataclass, field

from go_scan.errors import ScanError


@dataclass(frozen=True)
class Declaration:
    """A top-level Go function or method found in a source file."""
    name: str  # e.g., "HandleCreateWorkout"
    source_file: str  # root-joined path, e.g., "internal/api/workout_handler.go"
    package_name: str  # from the file's `package` clause, not the import path
    line_number: int  # 1-based line of the `func` keyword
    is_method: bool
    receiver_type: str = ""  # base type name for methods, e.g., "WorkoutHandler"
    inferred_purpose: str = ""  # cosmetic label, e.g., "Creates new data"


@dataclass
class ProjectSnapshot:
    """
    Everything one scan discovered. Files with no declarations are listed in
    `files` but never grouped under a package.
    """
    declarations: list[Declaration] = field(default_factory=list)
    files: list[str] = field(default_factory=list)
    packages: dict[str, list[str]] = field(default_factory=dict)  # package -> [files]
    errors: list[ScanError] = field(default_factory=list)  # tolerant scans only

    def add_file(self, path: str, declarations: list[Declaration]):
        self.declarations.extend(declarations)
        self.files.append(path)
        if declarations:
            pkg = declarations[0].package_name
            self.packages.setdefault(pkg, []).append(path)

    def declarations_by_package(self) -> dict[str, list[Declaration]]:
        groups: dict[str, list[Declaration]] = {}
        for decl in self.declarations:
            groups.setdefault(decl.package_name, []).append(decl)
        return groups
