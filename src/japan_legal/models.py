from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal
from urllib.parse import urlparse

Verdict = Literal["strong", "borderline"]
EvidenceFlag = Literal["has_witness_indicator"]
IndicatorCategory = Literal["public", "duration", "dignity"]


@dataclass(frozen=True)
class RetrievalRequest:
    url: str
    timeout_ms: int = 15000
    headers: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        parsed = urlparse(self.url)
        if not parsed.scheme or not parsed.netloc:
            raise ValueError(f"url must be absolute: {self.url!r}")
        if self.timeout_ms <= 0:
            raise ValueError(f"timeout_ms must be positive: {self.timeout_ms}")


@dataclass(frozen=True)
class RetrievedDocument:
    raw_markup: str
    source_url: str


@dataclass(frozen=True)
class CaseCandidate:
    title: str
    url: str


@dataclass(frozen=True)
class SeverityAssessment:
    verdict: Verdict
    rationale: str
    evidence_flags: frozenset[EvidenceFlag] = frozenset()
    matched_categories: tuple[IndicatorCategory, ...] = ()

    @property
    def has_witness_indicator(self) -> bool:
        return "has_witness_indicator" in self.evidence_flags


@dataclass(frozen=True)
class StatementRequest:
    incident_date: str
    location: str
    perpetrator: str
    behavior: str
    witnesses: str
    diagnosis: str
    company_response: str | None = None


@dataclass(frozen=True)
class ReferenceEntry:
    topic_keywords: frozenset[str]
    title: str
    url: str
    summary: str | None = None
