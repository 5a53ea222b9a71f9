from __future__ import annotations

from typing import Iterable

from . import kb
from .models import EvidenceFlag, IndicatorCategory, SeverityAssessment
from .rules import STRONG_RULES, WITNESS_TOKENS, IndicatorRule, evaluate_rules, has_any_token

BORDERLINE_RATIONALE = (
    "「中」または「強」の境界線上。詳細な状況確認が必要"
    "（発症前おおむね6か月以内の出来事か、対象疾病の診断があるか、"
    "業務以外の要因による発病でないか）"
)

RUBRIC_TEXT = """【厚労省 業務による心理的負荷評価表 パワーハラスメント】（令和5年9月改正版）

■ 出来事の類型: ⑤パワーハラスメント

【強】と判断される例:
✓ 治療を要する程度の暴行を受けた場合
✓ 暴行を執拗に受けた場合
✓ 人格・人間性を否定するような精神的攻撃が執拗に行われた場合
✓ 必要以上に長時間にわたる叱責、他の労働者の面前における大声での威圧的な叱責など
  社会通念に照らして許容される範囲を超える精神的攻撃
✓ 中程度の攻撃を受けた場合で、会社に相談しても改善されなかった場合

■ 3つの認定要件（すべて必要）
要件1: 発症前おおむね6か月以内に強い心理的負荷があること
要件2: 対象疾病（うつ病・適応障害等）と診断されていること
要件3: 業務以外の要因で発病したとは認められないこと"""


def classify(
    narrative: str,
    rules: Iterable[IndicatorRule] = STRONG_RULES,
    witness_tokens: Iterable[str] = WITNESS_TOKENS,
) -> SeverityAssessment:
    """出来事の記述をキーワードで「強」/境界線上に判定する。"""
    matched = evaluate_rules(narrative, rules)

    categories: list[IndicatorCategory] = []
    rationales: list[str] = []
    for rule in matched:
        if rule.category in categories:
            continue
        categories.append(rule.category)
        rationales.append(rule.rationale)

    flags: set[EvidenceFlag] = set()
    if has_any_token(narrative, witness_tokens):
        flags.add("has_witness_indicator")

    if matched:
        return SeverityAssessment(
            verdict="strong",
            rationale=f"根拠: {''.join(rationales)}に該当",
            evidence_flags=frozenset(flags),
            matched_categories=tuple(categories),
        )
    return SeverityAssessment(
        verdict="borderline",
        rationale=BORDERLINE_RATIONALE,
        evidence_flags=frozenset(flags),
    )


def render_criteria(situation: str) -> str:
    assessment = classify(situation)
    if assessment.verdict == "strong":
        judgement = f"心理的負荷「強」に該当する可能性が高い\n{assessment.rationale}"
    else:
        judgement = assessment.rationale
    bonus = (
        "\n【加点要素】目撃者の存在 → 証拠力が高く、認定を強化します"
        if assessment.has_witness_indicator
        else ""
    )
    criteria_pdf = kb.section("recognition_criteria")[0]

    return f"""{RUBRIC_TEXT}

━━━━━━━━━━━━━━━
■ 入力状況の評価
━━━━━━━━━━━━━━━
評価対象:「{situation}」

【判定】→ {judgement}
{bonus}

■ 参照文書
認定基準PDF: {criteria_pdf.url}"""
