from __future__ import annotations

import logging
import os
from pathlib import Path

import mkdocs_gen_files
from mkdocs.exceptions import ConfigurationError

from collatz_search import CollatzSearcher, Interval

log = logging.getLogger("mkdocs.plugins.gen-files")

DOCS_DIR = Path(__file__).resolve().parents[1] / "docs"

SNAPSHOT_STEPS = int(os.environ.get("COLLATZ_DOCS_SNAPSHOT_STEPS", "50000"))
MAX_ROWS = 25

LOW_WIDTH = 12
HIGH_WIDTH = 12
SIZE_WIDTH = 10


def _run_search(steps: int) -> CollatzSearcher:
    """Run a seeded searcher for a fixed number of steps."""
    searcher = CollatzSearcher(5)
    searcher.run(steps)
    searcher.validated.sort()
    return searcher


def _render_row(interval: Interval) -> str:
    size = interval.high - interval.low + 1
    return f"| {interval.low:>{LOW_WIDTH}} | {interval.high:>{HIGH_WIDTH}} | {size:>{SIZE_WIDTH}} |"


def _render_page(searcher: CollatzSearcher) -> str:
    """Render the snapshot page."""
    intervals = searcher.validated.intervals
    lines: list[str] = []
    lines.append("<!-- THIS FILE IS AUTOGENERATED. DO NOT EDIT BY HAND. -->")
    lines.append("")
    lines.append("# Validated snapshot")
    lines.append("")
    lines.append(
        f"After {searcher.steps} steps the search has reached base "
        f"`{searcher.base_under_test}` and holds {len(intervals)} validated interval(s)."
    )
    lines.append("")
    lines.append(f"| {'Low':>{LOW_WIDTH}} | {'High':>{HIGH_WIDTH}} | {'Size':>{SIZE_WIDTH}} |")
    lines.append(f"| {'':->{LOW_WIDTH-1}}: | {'':->{HIGH_WIDTH-1}}: | {'':->{SIZE_WIDTH-1}}: |")
    for interval in intervals[:MAX_ROWS]:
        lines.append(_render_row(interval))
    if len(intervals) > MAX_ROWS:
        lines.append("")
        lines.append(f"_{len(intervals) - MAX_ROWS} more interval(s) not shown._")
    lines.append("")
    return "\n".join(lines)


def main() -> None:
    """Main entry point for generating the snapshot page."""
    log.info("Running search for %d steps", SNAPSHOT_STEPS)
    content = _render_page(_run_search(SNAPSHOT_STEPS))

    rel_path = "snapshot.md"
    try:
        with mkdocs_gen_files.open(rel_path, "w") as f:
            f.write(content)
    except ConfigurationError:
        # Not running via mkdocs (standalone execution)
        out = DOCS_DIR / rel_path
        out.write_text(content, encoding="utf-8")
        log.info("Wrote %s", out)


# Configure logging for standalone execution
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(levelname)s - %(message)s')

# Always run - mkdocs-gen-files imports this script, so main() must execute at module level
main()
