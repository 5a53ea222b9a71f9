from __future__ import annotations

from typing import Callable
from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup

from .models import CaseCandidate, RetrievedDocument

LinkPredicate = Callable[[str], bool]

RELEVANT_LIMIT = 10
FALLBACK_LIMIT = 15


def href_contains(fragment: str) -> LinkPredicate:
    def predicate(href: str) -> bool:
        return fragment in href

    return predicate


def resolve_url(href: str, base_url: str) -> str:
    # "/..." はオリジン直下、"archives/1" は文書のディレクトリ基準で解決する
    if urlparse(href).scheme:
        return href
    return urljoin(base_url, href)


def extract_candidates(
    doc: RetrievedDocument, link_predicate: LinkPredicate, text_min_length: int = 5
) -> list[CaseCandidate]:
    """文書順に <a> を走査し、条件を満たす (タイトル, URL) を重複なしで返す。"""
    # html.parser は壊れたマークアップでも例外を出さずに木を作る
    soup = BeautifulSoup(doc.raw_markup, "html.parser")

    seen: set[tuple[str, str]] = set()
    candidates: list[CaseCandidate] = []
    for a in soup.find_all("a"):
        href = a.get("href") or ""
        text = a.get_text().strip()
        if not link_predicate(href) or len(text) <= text_min_length:
            continue

        candidate = CaseCandidate(title=text, url=resolve_url(href, doc.source_url))
        key = (candidate.title, candidate.url)
        if key in seen:
            continue
        seen.add(key)
        candidates.append(candidate)
    return candidates


def select_relevant(
    candidates: list[CaseCandidate], category: str, keyword: str | None = None
) -> list[CaseCandidate]:
    """カテゴリまたはキーワードを含むものを最大10件。該当なしなら先頭15件をそのまま返す。"""
    relevant = [
        c
        for c in candidates
        if category in c.title or (keyword and keyword in c.title)
    ]
    if relevant:
        return relevant[:RELEVANT_LIMIT]
    return candidates[:FALLBACK_LIMIT]


def extract(
    doc: RetrievedDocument,
    link_predicate: LinkPredicate,
    text_min_length: int,
    category: str,
    keyword: str | None = None,
) -> list[CaseCandidate]:
    return select_relevant(
        extract_candidates(doc, link_predicate, text_min_length), category, keyword
    )
