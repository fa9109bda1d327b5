from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from .edit_distance import EditOp, levenshtein
from .errors import ResourceExhaustedError
from .fqdn import split_labels
from .schemas import EditRecord, FailedComparison, Match, ScanResult

logger = logging.getLogger(__name__)

MIN_THRESHOLD = 1
MAX_THRESHOLD = 100


@dataclass(frozen=True)
class ScanOptions:
    threshold: int = 2
    skip_header: bool = True

    def __post_init__(self) -> None:
        if not MIN_THRESHOLD <= self.threshold <= MAX_THRESHOLD:
            raise ValueError(
                f"threshold must be between {MIN_THRESHOLD} and {MAX_THRESHOLD}, got {self.threshold}"
            )


@dataclass(frozen=True)
class Comparison:
    keyword: str
    label: str
    distance: int
    ops: list[EditOp]


def compare(keyword: str, label: str) -> Comparison:
    distance, ops = levenshtein(keyword, label)
    return Comparison(keyword=keyword, label=label, distance=distance, ops=ops)


def _edit_records(ops: list[EditOp]) -> list[EditRecord]:
    return [
        EditRecord(op=o.op, source=o.source, target=o.target, position=o.position)  # type: ignore[arg-type]
        for o in ops
    ]


def scan(keywords: Iterable[str], fqdns: Iterable[str], options: ScanOptions) -> ScanResult:
    """
    Compare every keyword against every label of every FQDN.

    A pair matches when its distance is within `options.threshold`. Pairs that
    could not be compared end up in `failures`, never in `matches`.
    """
    keyword_list = list(keywords)
    fqdn_list = list(fqdns)
    result = ScanResult(threshold=options.threshold, keywords=len(keyword_list), fqdns_processed=len(fqdn_list))

    for keyword in keyword_list:
        logger.debug("Scanning keyword %r", keyword)
        for fqdn in fqdn_list:
            for label in split_labels(fqdn):
                result.comparisons += 1
                try:
                    cmp = compare(keyword, label)
                except ResourceExhaustedError as e:
                    logger.error("Comparison %r vs %r in %s failed: %s", keyword, label, fqdn, e)
                    result.failures.append(
                        FailedComparison(keyword=keyword, label=label, fqdn=fqdn, reason=str(e))
                    )
                    continue
                if cmp.distance > options.threshold:
                    continue
                logger.debug("K: [%s], H: [%s] in [%s] distance %d", keyword, label, fqdn, cmp.distance)
                result.matches.append(
                    Match(
                        distance=cmp.distance,
                        keyword=keyword,
                        label=label,
                        fqdn=fqdn,
                        edits=_edit_records(cmp.ops),
                    )
                )
    return result
