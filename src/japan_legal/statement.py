from __future__ import annotations

from .models import StatementRequest

DEFAULT_COMPANY_RESPONSE = "会社からの謝罪・再発防止措置は一切ありませんでした。"

RULE = "━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━"

# TODO: 分類器の判定が「強」でない記述にもこの段落が入る。判定結果で文面を切り替えるか利用者と要相談。
SEVERITY_BASIS = """本件は、厚労省「業務による心理的負荷評価表」⑤パワーハラスメントの類型における
「必要以上に長時間にわたる厳しい叱責、他の労働者の面前における大声での威圧的な叱責
など、態様や手段が社会通念に照らして許容される範囲を超える精神的攻撃」に該当します。
心理的負荷の強度は「強」と評価されるべき事案です。"""

DISCLAIMER = "【注意】この文章はAI支援案です。主治医・社労士・弁護士に確認の上ご使用ください。"


def compose(request: StatementRequest) -> str:
    """様式第23号「業務上の出来事」の記述案を組み立てる。"""
    company_response = request.company_response or DEFAULT_COMPANY_RESPONSE
    return f"""{RULE}
【様式第23号 業務上の出来事の記述（案）】
{RULE}

■ 発生日時・場所
{request.incident_date}、{request.location}において

■ 業務上の出来事
{request.perpetrator}より、以下の行為を受けました。

{request.behavior}

目撃者: {request.witnesses}

■ 心理的負荷の評価根拠
{SEVERITY_BASIS}

■ 発症との因果関係
上記出来事の直後より症状が生じ、「{request.diagnosis}」の診断を受けました。

■ 会社の対応
{company_response}

{RULE}
{DISCLAIMER}
{RULE}"""
