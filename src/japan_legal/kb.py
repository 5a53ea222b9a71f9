from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .models import ReferenceEntry

HARASSMENT_PRECEDENT_URL = "https://www.no-harassment.mhlw.go.jp/foundation/judicail-precedent/"
COURT_SEARCH_URL = "https://www.courts.go.jp/app/hanrei_jp/search2"
EGOV_LAW_URL = "https://laws.e-gov.go.jp"
ZENKIREN_DB_URL = "https://www.zenkiren.com/Portals/0/html/jinji/hannrei/"

_HARASSMENT_TOPICS = frozenset({"パワハラ", "精神障害", "労災"})


def _entry(keywords: set[str] | frozenset[str], title: str, url: str, summary: str | None = None) -> ReferenceEntry:
    return ReferenceEntry(topic_keywords=frozenset(keywords), title=title, url=url, summary=summary)


_SECTIONS: dict[str, tuple[ReferenceEntry, ...]] = {
    "harassment_precedents": (
        _entry({"ハラスメント", "パワハラ", "裁判例"}, "厚労省 あかるい職場応援団 裁判例", HARASSMENT_PRECEDENT_URL),
    ),
    "insurance_decisions": (
        _entry(
            {"裁決", "労働保険審査会"},
            "裁決事案一覧",
            "https://www.mhlw.go.jp/topics/bukyoku/shinsa/roudou/saiketu-youshi/",
        ),
        _entry({"裁決", "精神疾患"}, "精神疾患関係裁決集(PDF)", "http://gyosei-bunsyo.net/H21rsinsml.pdf"),
        _entry(
            {"裁決", "社労士"},
            "大阪SR会資料(PDF)",
            "https://osakasr.jp/upload/files/uploadedfile/202405/jCVPGub33850.pdf",
        ),
    ),
    "court_portals": (
        _entry({"判例", "裁判所"}, "裁判所判例検索（総合）", "https://www.courts.go.jp/hanrei/index.html"),
        _entry({"判例", "労働事件"}, "労働事件裁判例集", f"{COURT_SEARCH_URL}?page=1&sort=1&hanreiSyu=4"),
        _entry({"判例", "全労連"}, "全労連判例検索", ZENKIREN_DB_URL),
    ),
    "leading_precedents": (
        _entry(
            _HARASSMENT_TOPICS,
            "栃木労基署長事件（パワハラ・精神障害）",
            "https://www.zenkiren.com/Portals/0/html/jinji/hannrei/shoshi/08736.html",
        ),
        _entry(
            _HARASSMENT_TOPICS,
            "半田労基署長事件（退職勧奨・精神障害）",
            "https://www.zenkiren.com/Portals/0/html/jinji/hannrei/shoshi/09160.html",
        ),
        _entry(
            _HARASSMENT_TOPICS,
            "京都労基署長事件（集団いじめ）",
            "https://www.jaaww.or.jp/joho/data/2012_0120_29.html",
        ),
    ),
    "labor_standard_cases": (
        _entry(
            {"労働基準", "障害補償"},
            "栃木労働基準監督署長事件",
            "https://www.zenkiren.com/Portals/0/html/jinji/hannrei/shoshi/08736.html",
            summary="パワハラ等による精神障害、障害補償給付不支給処分取消",
        ),
        _entry(
            {"労働基準", "退職勧奨", "業務起因性"},
            "国・半田労基署長（医療法人B会D病院）事件",
            "https://www.zenkiren.com/Portals/0/html/jinji/hannrei/shoshi/09160.html",
            summary="パワハラ・退職勧奨による精神障害発症の業務起因性",
        ),
        _entry(
            {"労働基準", "いじめ", "療養補償"},
            "国・京都下労基署長事件（女性社員集団いじめ）",
            "https://www.jaaww.or.jp/joho/data/2012_0120_29.html",
            summary="精神障害・労災療養補償給付の認定",
        ),
    ),
    "recognition_criteria": (
        _entry({"認定基準", "心理的負荷"}, "精神障害の労災認定基準", "https://www.mhlw.go.jp/content/000637497.pdf"),
    ),
}

SECTIONS: Mapping[str, tuple[ReferenceEntry, ...]] = MappingProxyType(_SECTIONS)

STATUTE_CITATIONS: tuple[str, ...] = (
    "労働基準法 第75条: 療養補償",
    "労働基準法 第76条: 休業補償",
    "労働基準法 第79条: 障害補償",
    "労災保険法 第7条: 業務災害の定義",
    "労働施策総合推進法 第30条の2: パワハラ防止措置義務",
)


def section(name: str) -> tuple[ReferenceEntry, ...]:
    return SECTIONS.get(name, ())


def lookup(topic: str) -> tuple[ReferenceEntry, ...]:
    """topic に含まれるキーワードを持つエントリを表の順に返す。該当なしは空。"""
    hits: list[ReferenceEntry] = []
    for entries in SECTIONS.values():
        for entry in entries:
            if entry in hits:
                continue
            if any(k in topic for k in entry.topic_keywords):
                hits.append(entry)
    return tuple(hits)


def is_harassment_topic(keyword: str) -> bool:
    return any(k in keyword for k in _HARASSMENT_TOPICS)
