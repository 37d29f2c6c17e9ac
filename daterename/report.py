from pathlib import Path
from typing import List, Optional

from .models import RunCounters

RULE = "-" * 40


def render(counters: RunCounters, backup_dir: Optional[Path] = None,
           dry_run: bool = False, confirmed: bool = True) -> List[str]:
    """Format the end-of-run summary, one log line per entry."""
    verb = "Would rename" if dry_run else "Renamed"
    lines = [
        RULE,
        "Summary" + (" (dry run)" if dry_run else ""),
        f"Total scanned: {counters.total_scanned}",
        f"{verb}: {counters.renamed}",
        f"Already named: {counters.unchanged}",
        f"Skipped: {counters.skipped}",
        f"{'Would back up' if dry_run else 'Backed up'}: {counters.backed_up}",
        f"Failed: {counters.failed}",
    ]
    if backup_dir is not None:
        lines.append(f"Backup folder: {backup_dir}")
    if dry_run:
        lines.append("Dry run complete: no files were changed.")
    elif not confirmed:
        lines.append("No changes made.")
    lines.append(RULE)
    return lines
