#!/usr/bin/env python3
"""
Tree-sitter Go Scanner (Python)
-------------------------------
Parses Go code to collect:
- package names and the files belonging to each
- top-level functions and methods (with file, line and receiver type)
- a rough purpose and development phase for each function

USAGE EXAMPLES
--------------
# 1) Run against an in-code sample (no files needed):
go-scan

# 2) Scan a Go project (recursive; skips hidden dirs, vendor/ and *_test.go):
go-scan /path/to/go/project

# 3) Also write the Markdown reports and print JSON:
go-scan /path/to/go/project --out docs/generated --json

# 4) Keep going past files that fail to parse:
go-scan /path/to/go/project --tolerant

Set GO_SCAN_LOG_LEVEL=DEBUG (or pass -v) to see each file as it's indexed.

DEPENDENCIES
------------
    pip install tree-sitter tree-sitter-go
"""

import argparse
import logging
import os
import sys

from go_scan.errors import ScanError
from go_scan.indexer import GoIndexer
from go_scan.inputs.directory_scanning import scan
from go_scan.log_utils import setup_logger
from go_scan.models.ast_models import ProjectSnapshot
from go_scan.outputs.output import print_summary, to_json, write_reports

log = logging.getLogger("go_scan")

# --- Demo main ---------------------------------------------------------------

SAMPLE_GO = r"""
package store

import "database/sql"

type WorkoutStore struct {
	db *sql.DB
}

func NewWorkoutStore(db *sql.DB) *WorkoutStore {
	return &WorkoutStore{db: db}
}

func (s *WorkoutStore) CreateWorkout(name string) error {
	_, err := s.db.Exec("INSERT INTO workouts (name) VALUES ($1)", name)
	return err
}

func (s *WorkoutStore) GetWorkoutByID(id int64) (string, error) {
	var name string
	err := s.db.QueryRow("SELECT name FROM workouts WHERE id = $1", id).Scan(&name)
	return name, err
}

func validateName(name string) bool {
	return name != ""
}
"""


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="go-scan", description="Inventory the functions of a Go project")
    parser.add_argument("root", nargs="?", help="Project directory to scan (default: built-in sample)")
    parser.add_argument("--out", help="Directory to write the Markdown reports into")
    parser.add_argument("--json", action="store_true", help="Print the snapshot as JSON")
    parser.add_argument("--tolerant", action="store_true",
                        help="Skip files that can't be read or parsed instead of failing")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def sample_snapshot() -> ProjectSnapshot:
    snapshot = ProjectSnapshot()
    snapshot.add_file("<sample>", GoIndexer().index_source(SAMPLE_GO, "<sample>"))
    return snapshot


def main(argv=None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    setup_logger("go_scan", level=logging.DEBUG if args.verbose else None)

    if args.root is None:
        snapshot = sample_snapshot()
    else:
        if not os.path.isdir(args.root):
            parser.error(f"not a directory: {args.root}")
        print("Scanning project for functions...")
        try:
            snapshot = scan(args.root, tolerant=args.tolerant)
        except ScanError as e:
            log.warning("Project scanning failed: %s", e)
            return 1

    print(f"Found {len(snapshot.declarations)} functions across {len(snapshot.files)} files")
    print_summary(snapshot)

    if args.json:
        print("\n=== JSON ===")
        print(to_json(snapshot))

    if args.out:
        for path in write_reports(args.out, snapshot):
            print(f"Wrote {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
