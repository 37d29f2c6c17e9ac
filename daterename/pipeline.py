"""Run orchestrator: scan -> plan -> confirm -> apply -> report."""

import logging
from datetime import datetime
from enum import Enum
from typing import Callable, List, Optional, Set

from .backup import BackupDirectory, copy_file, rename_file
from .errors import MissingDirectoryError, NotADirectoryInputError, UnwritableDirectoryError
from .metadata import read_date_taken
from .models import (
    FileEntry,
    Rename,
    RenamePlan,
    RunCounters,
    RunOptions,
    RunResult,
    SkipNoMetadata,
    SkipUnparseable,
)
from .planner import plan
from .report import render
from .runlog import close_run_log, open_run_log
from .scanner import list_candidate_files


class RunState(Enum):
    NEW = "new"
    SCANNING = "scanning"
    PREVIEWED = "previewed"
    CONFIRMATION_PENDING = "confirmation pending"
    CONFIRMED = "confirmed"
    DECLINED = "declined"
    DRY_RUN = "dry run"
    APPLYING = "applying"
    REPORTED = "reported"


def _decline(prompt: str) -> bool:
    return False


class RunPipeline:
    """
    One rename run over one folder.

    Collaborators are injected so tests can run without a terminal or real
    images: ``reader`` returns the raw date string for a FileEntry,
    ``confirm`` answers the yes/no prompt, ``copier`` and ``renamer`` do the
    actual filesystem work. A pipeline runs once.
    """

    def __init__(self, options: RunOptions,
                 reader: Callable[[FileEntry], Optional[str]] = read_date_taken,
                 confirm: Callable[[str], bool] = _decline,
                 copier=copy_file,
                 renamer=rename_file,
                 lister=list_candidate_files,
                 started_at: Optional[datetime] = None):
        self.options = options
        self.reader = reader
        self.confirm = confirm
        self.copier = copier
        self.renamer = renamer
        self.lister = lister
        self.started_at = started_at or datetime.now()
        self.counters = RunCounters()
        self.backup = BackupDirectory(options.directory, self.started_at)
        self.state = RunState.NEW
        self.log: Optional[logging.Logger] = None

    def run(self) -> RunResult:
        if self.state is not RunState.NEW:
            raise RuntimeError("A RunPipeline can only be run once")
        self._check_directory()

        try:
            self.log = open_run_log(self.options.directory, self.options.log_name, self.options.quiet)
        except OSError as e:
            raise UnwritableDirectoryError(f"Cannot write log file in {self.options.directory}: {e}") from e
        try:
            return self._run()
        finally:
            close_run_log(self.log)

    def _check_directory(self) -> None:
        directory = self.options.directory
        if not directory.exists():
            raise MissingDirectoryError(f"Directory does not exist: {directory}")
        if not directory.is_dir():
            raise NotADirectoryInputError(f"Not a directory: {directory}")

    def _run(self) -> RunResult:
        opts = self.options
        self.log.info(
            "Run started %s on %s (dry_run=%s, backup=%s, fallback_mdate=%s, date_order=%s)",
            self.started_at.strftime("%Y-%m-%d %H:%M:%S"), opts.directory,
            opts.dry_run, opts.backup, opts.fallback_mdate, opts.date_order.value,
        )

        plans = self.scan()
        confirmed = self.gate(plans)
        if confirmed:
            self.apply(plans)

        backup_dir = self.backup.path if self.backup.created else None
        report = render(self.counters, backup_dir, dry_run=opts.dry_run, confirmed=confirmed)
        for line in report:
            self.log.info(line)
        self.state = RunState.REPORTED
        return RunResult(self.counters, plans, backup_dir, confirmed, report)

    # Phase 1: build the plans; touches nothing on disk
    def scan(self) -> List[RenamePlan]:
        self.state = RunState.SCANNING
        plans: List[RenamePlan] = []
        for entry in self.lister(self.options.directory):
            raw = self.reader(entry)
            p = plan(entry, raw, self.options.fallback_mdate, self.options.date_order)
            self.counters.total_scanned += 1
            if isinstance(p.decision, SkipNoMetadata):
                self.counters.skipped += 1
                self.log.warning("Skipped %s: no date taken metadata", entry.name)
            elif isinstance(p.decision, SkipUnparseable):
                self.counters.skipped += 1
                self.log.warning("Skipped %s: could not parse date %r (%s)",
                                 entry.name, p.decision.raw, p.decision.reason)
            plans.append(p)
        self.state = RunState.PREVIEWED
        return plans

    # Phase 2: dry run and --yes go straight through, otherwise ask
    def gate(self, plans: List[RenamePlan]) -> bool:
        if self.options.dry_run:
            self.state = RunState.DRY_RUN
            return True
        if self.options.assume_yes:
            self.state = RunState.CONFIRMED
            return True

        self.state = RunState.CONFIRMATION_PENDING
        renames = [p for p in plans if p.is_rename and p.decision.new_name != p.source.name]
        for p in renames:
            self.log.info("Planned: %s -> %s (%s)", p.source.name, p.decision.new_name,
                          p.decision.date_source.value)
        self.log.info("%d of %d file(s) will be renamed, %d skipped.",
                      len(renames), self.counters.total_scanned, self.counters.skipped)

        if self.confirm(f"Rename {len(renames)} file(s) in {self.options.directory}?"):
            self.state = RunState.CONFIRMED
            return True
        self.state = RunState.DECLINED
        self.log.info("No changes made.")
        return False

    # Phase 3: replay the same plans in the same order
    def apply(self, plans: List[RenamePlan]) -> None:
        self.state = RunState.APPLYING
        claimed: Set[str] = set()
        released: Set[str] = set()
        for p in plans:
            if isinstance(p.decision, Rename):
                self._apply_one(p.source, p.decision, claimed, released)

    def _apply_one(self, entry: FileEntry, decision: Rename,
                   claimed: Set[str], released: Set[str]) -> None:
        dry_run = self.options.dry_run
        new_name = decision.new_name
        if new_name == entry.name:
            self.counters.unchanged += 1
            self.log.info("Already named: %s", entry.name)
            return

        target = entry.path.with_name(new_name)
        # A name an earlier rename moved away from is free, also in a dry run
        if new_name in claimed or (target.exists() and new_name not in released):
            self.counters.failed += 1
            self.log.error("Cannot rename %s: %s already exists", entry.name, new_name)
            return
        if not dry_run and not entry.path.exists():
            self.counters.failed += 1
            self.log.error("Cannot rename %s: file no longer exists", entry.name)
            return

        if self.options.backup:
            if dry_run:
                self.log.info("Would back up %s to %s", entry.name, self.backup.path)
            else:
                try:
                    self.copier(entry.path, self.backup.ensure())
                except OSError as e:
                    self.counters.failed += 1
                    self.log.error("Backup failed for %s, not renamed: %s", entry.name, e)
                    return
                self.log.info("Backed up %s to %s", entry.name, self.backup.path)
            self.counters.backed_up += 1

        if dry_run:
            self.log.info("Would rename %s -> %s (%s)", entry.name, new_name, decision.date_source.value)
        else:
            try:
                self.renamer(entry.path, new_name)
            except OSError as e:
                self.counters.failed += 1
                self.log.error("Rename failed for %s -> %s: %s", entry.name, new_name, e)
                return
            self.log.info("Renamed %s -> %s (%s)", entry.name, new_name, decision.date_source.value)
        claimed.add(new_name)
        released.add(entry.name)
        self.counters.renamed += 1
