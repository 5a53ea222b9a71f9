from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .models import IndicatorCategory

PUBLIC_RATIONALE = "「面前での大声による威圧的な叱責」"
DURATION_RATIONALE = "「長時間にわたる叱責」"
DIGNITY_RATIONALE = "「人格・人間性を否定するような精神的攻撃」"


@dataclass(frozen=True)
class IndicatorRule:
    category: IndicatorCategory
    token: str
    rationale: str


# 心理的負荷評価表 ⑤パワーハラスメント「強」の具体例に対応する語。上から順に評価する。
STRONG_RULES: tuple[IndicatorRule, ...] = (
    IndicatorRule("public", "面前", PUBLIC_RATIONALE),
    IndicatorRule("public", "大声", PUBLIC_RATIONALE),
    IndicatorRule("public", "威圧", PUBLIC_RATIONALE),
    IndicatorRule("duration", "長時間", DURATION_RATIONALE),
    IndicatorRule("dignity", "人格", DIGNITY_RATIONALE),
    IndicatorRule("dignity", "否定", DIGNITY_RATIONALE),
)

# 人数（「3名」など）、目撃、同僚への言及
WITNESS_TOKENS: tuple[str, ...] = ("名", "目撃", "社員")


def evaluate_rules(
    narrative: str, rules: Iterable[IndicatorRule] = STRONG_RULES
) -> list[IndicatorRule]:
    return [rule for rule in rules if rule.token in narrative]


def has_any_token(narrative: str, tokens: Iterable[str]) -> bool:
    return any(token in narrative for token in tokens)
