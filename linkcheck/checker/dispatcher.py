"""Bounded dispatcher: probe a capped batch of links concurrently.

Every capped entry is submitted to a ``ThreadPoolExecutor`` at once and the
dispatcher waits until all of them have settled.  Each probe carries its own
timeouts, so the batch takes as long as its slowest link, not the sum of
them.  Outcomes are written into a slot per input position, which keeps
the result in document order whatever order the probes finish in.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import List, Optional, Sequence

from linkcheck.config import ProbeConfig
from linkcheck.checker.models import (
    CandidateLink,
    DispatchResult,
    LinkEntry,
    LinkOutcome,
)
from linkcheck.checker.prober import CONNECTION_FAILED, probe_link


def truncation_warning(limit: int, total: int) -> str:
    return f"Only checking first {limit} links out of {total} total links found."


def dispatch(
    entries: Sequence[LinkEntry],
    config: ProbeConfig,
    max_links: int,
) -> DispatchResult:
    """Probe up to *max_links* of *entries* and return their outcomes.

    Entries past the cap are dropped without being probed or reported; a
    warning records how many were skipped.  Entries that are already
    :class:`LinkOutcome` instances (malformed hrefs) keep their slot and cost
    no network call.  A probe that raises is recorded as ``status=0`` for its
    own link and never affects its siblings.
    """
    warnings: List[str] = []
    if len(entries) > max_links:
        warnings.append(truncation_warning(max_links, len(entries)))
    batch = list(entries[:max_links])

    slots: List[Optional[LinkOutcome]] = [None] * len(batch)
    pending = {}
    for index, entry in enumerate(batch):
        if isinstance(entry, LinkOutcome):
            slots[index] = entry
        else:
            pending[index] = entry

    if pending:
        print(f"[CHECKING] Probing {len(pending)} link(s) …")
        with ThreadPoolExecutor(max_workers=len(pending)) as pool:
            future_to_index = {
                pool.submit(probe_link, candidate, config): index
                for index, candidate in pending.items()
            }
            for future in as_completed(future_to_index):
                index = future_to_index[future]
                candidate: CandidateLink = pending[index]
                try:
                    slots[index] = future.result()
                except Exception as exc:
                    print(f"[CHECKING] ✗ Probe crashed for {candidate.url!r}: {exc}")
                    slots[index] = LinkOutcome(
                        url=candidate.url,
                        status=CONNECTION_FAILED,
                        text=candidate.text,
                        is_external=candidate.is_external,
                    )

    outcomes = [slot for slot in slots if slot is not None]
    broken = sum(1 for outcome in outcomes if outcome.is_broken)
    print(f"[CHECKING] Done: {len(outcomes) - broken} working, {broken} broken.")
    return DispatchResult(outcomes=outcomes, warnings=warnings)
