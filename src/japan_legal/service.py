from __future__ import annotations

import logging
from urllib.parse import quote

from . import kb
from .criteria import render_criteria
from .extractor import extract, href_contains
from .fetcher import FetchError, fetch_page
from .models import StatementRequest
from .statement import compose

logger = logging.getLogger(__name__)

PRECEDENT_LINK_FRAGMENT = "judicail-precedent"
PRECEDENT_TITLE_MIN_LENGTH = 5

# encodeURIComponent と同じく残す記号
URI_COMPONENT_SAFE = "!~*'()"


def search_harassment_cases(category: str, keyword: str | None = None) -> str:
    url = kb.HARASSMENT_PRECEDENT_URL
    try:
        doc = fetch_page(url)
    except FetchError as e:
        logger.warning(f"search_harassment_cases fell back to static reference: {e}")
        fallback = kb.section("harassment_precedents")[0]
        return f"エラー: {e}\n{fallback.url}"

    cases = extract(
        doc,
        href_contains(PRECEDENT_LINK_FRAGMENT),
        PRECEDENT_TITLE_MIN_LENGTH,
        category,
        keyword,
    )
    logger.info(f"search_harassment_cases category={category!r} keyword={keyword!r}: {len(cases)} hits")

    results: list[str] = [
        f"【厚労省 あかるい職場応援団 裁判例】\n検索: {category}{'/' + keyword if keyword else ''}\n"
    ]
    for i, c in enumerate(cases, 1):
        results.append(f"{i}. {c.title}\n   {c.url}\n")
    results.append(f"\n参考: {url}")
    return "\n".join(results)


def search_labor_insurance_decisions(keyword: str) -> str:
    results = [f"【労働保険審査会 裁決事案】\nキーワード: {keyword}\n"]
    for entry in kb.section("insurance_decisions"):
        results.append(f"{entry.title}: {entry.url}")
    return "\n".join(results)


def court_search_url(keyword: str) -> str:
    return f"{kb.COURT_SEARCH_URL}?page=1&sort=1&body={quote(keyword, safe=URI_COMPONENT_SAFE)}"


def search_court_cases(keyword: str, case_type: str | None = None) -> str:
    results = [
        f"【裁判所 判例検索】\nキーワード: {keyword}{' / ' + case_type if case_type else ''}\n",
        f"検索URL: {court_search_url(keyword)}\n",
    ]
    portals = kb.section("court_portals")
    for i, entry in enumerate(portals, 1):
        line = f"{i}. {entry.title}: {entry.url}"
        results.append(line + "\n" if i == len(portals) else line)

    if kb.is_harassment_topic(keyword):
        results.append("【関連主要判例】")
        for entry in kb.section("leading_precedents"):
            results.append(f"- {entry.title}: {entry.url}")
    return "\n".join(results)


def get_psychological_load_criteria(situation: str) -> str:
    return render_criteria(situation)


def law_search_url(law_name: str) -> str:
    return f"{kb.EGOV_LAW_URL}/search/?query={quote(law_name, safe=URI_COMPONENT_SAFE)}"


def search_law(law_name: str) -> str:
    citations = "\n".join(f"- {c}" for c in kb.STATUTE_CITATIONS)
    return (
        f"【e-Gov 法令検索】\nキーワード: {law_name}\n検索URL: {law_search_url(law_name)}\n\n"
        f"【労働・労災の主要条文】\n{citations}\n\n{kb.EGOV_LAW_URL}"
    )


def search_labor_standard_cases(keyword: str) -> str:
    blocks = [
        f"{i}. {entry.title}\n   {entry.summary}\n   {entry.url}"
        for i, entry in enumerate(kb.section("labor_standard_cases"), 1)
    ]
    body = "\n\n".join(blocks)
    return (
        f"【全労連 労働基準判例検索】\nキーワード: {keyword}\n\n【主要判例】\n{body}\n\n"
        f"全労連判例DB: {kb.ZENKIREN_DB_URL}"
    )


def generate_rousai_statement(
    incident_date: str,
    location: str,
    perpetrator: str,
    behavior: str,
    witnesses: str,
    diagnosis: str,
    company_response: str | None = None,
) -> str:
    return compose(
        StatementRequest(
            incident_date=incident_date,
            location=location,
            perpetrator=perpetrator,
            behavior=behavior,
            witnesses=witnesses,
            diagnosis=diagnosis,
            company_response=company_response,
        )
    )
