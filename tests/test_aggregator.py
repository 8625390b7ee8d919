"""Tests for outcome aggregation into the final report."""

from __future__ import annotations

import pytest

from linkcheck.checker.aggregator import aggregate, success_rate
from linkcheck.checker.models import (
    DispatchResult,
    ExtractedLinks,
    LinkOutcome,
    LinkTallies,
)


def _outcome(i: int, status: int, external: bool = False) -> LinkOutcome:
    return LinkOutcome(url=f"https://example.com/{i}", status=status, text=str(i), is_external=external)


def _extracted(total: int = 10, internal: int = 3, external: int = 2) -> ExtractedLinks:
    return ExtractedLinks(
        total_anchors=total,
        tallies=LinkTallies(internal=internal, external=external),
    )


# ---------------------------------------------------------------------------
# success_rate
# ---------------------------------------------------------------------------

class TestSuccessRate:
    def test_nothing_checked_is_100(self) -> None:
        assert success_rate(0, 0) == 100

    def test_all_broken_is_0(self) -> None:
        assert success_rate(0, 7) == 0

    def test_half(self) -> None:
        assert success_rate(1, 1) == 50

    def test_rounds_half_up(self) -> None:
        # 1/8 = 12.5% → 13, not banker's rounding to 12
        assert success_rate(1, 7) == 13

    def test_rounds_to_nearest(self) -> None:
        assert success_rate(2, 1) == 67
        assert success_rate(1, 2) == 33


# ---------------------------------------------------------------------------
# aggregate
# ---------------------------------------------------------------------------

class TestAggregate:
    @pytest.mark.parametrize(
        ("status", "broken"),
        [(0, True), (400, True), (404, True), (599, True),
         (200, False), (204, False), (301, False), (399, False), (101, False)],
    )
    def test_broken_classification(self, status: int, broken: bool) -> None:
        result = aggregate(
            "https://example.com/",
            _extracted(),
            DispatchResult(outcomes=[_outcome(0, status)]),
            max_broken=20,
        )
        assert (result.summary.broken_count == 1) is broken
        assert result.working_links == (0 if broken else 1)

    def test_counts_and_tallies(self) -> None:
        outcomes = [_outcome(0, 200), _outcome(1, 404), _outcome(2, 0, external=True)]
        result = aggregate(
            "https://example.com/",
            _extracted(total=12, internal=2, external=1),
            DispatchResult(outcomes=outcomes),
            max_broken=20,
        )
        assert result.url == "https://example.com/"
        assert result.total_links == 12
        assert result.working_links == 1
        assert result.summary.broken_count == 2
        assert result.summary.internal_links == 2
        assert result.summary.external_links == 1
        assert result.summary.success_rate == 33
        assert [b.status for b in result.broken_links] == [404, 0]

    def test_broken_report_truncated_but_count_is_not(self) -> None:
        outcomes = [_outcome(i, 500) for i in range(25)] + [_outcome(99, 200)]
        result = aggregate(
            "https://example.com/", _extracted(), DispatchResult(outcomes=outcomes), max_broken=20
        )
        assert len(result.broken_links) == 20
        assert result.summary.broken_count == 25
        assert [b.url for b in result.broken_links] == [
            f"https://example.com/{i}" for i in range(20)
        ]
        assert result.summary.success_rate == 4

    def test_empty_outcomes(self) -> None:
        result = aggregate(
            "https://example.com/", _extracted(total=1, internal=0, external=0),
            DispatchResult(), max_broken=20,
        )
        assert result.working_links == 0
        assert result.broken_links == []
        assert result.summary.success_rate == 100

    def test_warnings_ordered_extractor_first(self) -> None:
        extracted = _extracted()
        extracted.warnings.append("from extractor")
        result = aggregate(
            "https://example.com/", extracted,
            DispatchResult(warnings=["from dispatcher"]), max_broken=20,
        )
        assert result.warnings == ["from extractor", "from dispatcher"]


class TestToDict:
    def test_wire_format(self) -> None:
        result = aggregate(
            "https://example.com/",
            _extracted(total=3, internal=1, external=1),
            DispatchResult(outcomes=[_outcome(0, 200), _outcome(1, 0, external=True)]),
            max_broken=20,
        )
        assert result.to_dict() == {
            "url": "https://example.com/",
            "totalLinks": 3,
            "workingLinks": 1,
            "brokenLinks": [
                {"url": "https://example.com/1", "status": 0, "text": "1", "isExternal": True}
            ],
            "warnings": [],
            "summary": {
                "internalLinks": 1,
                "externalLinks": 1,
                "brokenCount": 1,
                "successRate": 50,
            },
        }
