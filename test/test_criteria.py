import pytest

from japan_legal.criteria import BORDERLINE_RATIONALE, classify, render_criteria
from japan_legal.rules import DIGNITY_RATIONALE, DURATION_RATIONALE, PUBLIC_RATIONALE, STRONG_RULES, IndicatorRule


def test_prolonged_public_scolding_is_strong():
    assessment = classify("長時間にわたり面前で大声で叱責された")

    assert assessment.verdict == "strong"
    assert assessment.matched_categories == ("public", "duration")
    assert assessment.rationale == f"根拠: {PUBLIC_RATIONALE}{DURATION_RATIONALE}に該当"
    assert "面前での大声による威圧的な叱責" in assessment.rationale
    assert "長時間にわたる叱責" in assessment.rationale


def test_light_warning_is_borderline():
    assessment = classify("軽い注意を受けた")

    assert assessment.verdict == "borderline"
    assert assessment.rationale == BORDERLINE_RATIONALE
    assert assessment.matched_categories == ()
    assert not assessment.has_witness_indicator


def test_dignity_denial_names_its_category():
    assessment = classify("人格を否定する発言を繰り返された")

    assert assessment.matched_categories == ("dignity",)
    assert DIGNITY_RATIONALE in assessment.rationale


@pytest.mark.parametrize("token", [rule.token for rule in STRONG_RULES])
def test_appending_any_strong_token_makes_verdict_strong(token):
    narrative = "軽い注意を受けた"
    assert classify(narrative).verdict == "borderline"

    assert classify(narrative + " " + token).verdict == "strong"


def test_classification_is_deterministic():
    narrative = "同僚3名の面前で威圧的に叱責された"

    assert classify(narrative) == classify(narrative)


def test_witness_flag_is_independent_of_verdict():
    assessment = classify("他の社員が見ている中で注意を受けた")

    assert assessment.verdict == "borderline"
    assert assessment.evidence_flags == frozenset({"has_witness_indicator"})


def test_matching_is_case_sensitive_substring():
    assert classify("ＰＯＷＥＲ").verdict == "borderline"
    rules = (IndicatorRule("public", "Loud", PUBLIC_RATIONALE),)
    assert classify("loud voice", rules=rules).verdict == "borderline"
    assert classify("Loud voice", rules=rules).verdict == "strong"


def test_rule_table_can_be_extended_without_code_changes():
    extended = STRONG_RULES + (IndicatorRule("dignity", "無視", DIGNITY_RATIONALE),)

    assert classify("会議で無視され続けた").verdict == "borderline"
    assert classify("会議で無視され続けた", rules=extended).verdict == "strong"


def test_render_criteria_strong_with_witness_bonus():
    text = render_criteria("部長から長時間、社員10名の面前で大声で叱責された")

    assert "【判定】→ 心理的負荷「強」に該当する可能性が高い" in text
    assert "根拠: 「面前での大声による威圧的な叱責」「長時間にわたる叱責」に該当" in text
    assert "【加点要素】目撃者の存在" in text
    assert "評価対象:「部長から長時間、社員10名の面前で大声で叱責された」" in text
    assert "認定基準PDF: https://www.mhlw.go.jp/content/000637497.pdf" in text


def test_render_criteria_borderline_without_bonus():
    text = render_criteria("軽い注意を受けた")

    assert "【判定】→ 「中」または「強」の境界線上。詳細な状況確認が必要" in text
    assert "【加点要素】" not in text
    assert "要件1: 発症前おおむね6か月以内に強い心理的負荷があること" in text
