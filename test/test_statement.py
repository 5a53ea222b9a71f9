from japan_legal.models import StatementRequest
from japan_legal.statement import DEFAULT_COMPANY_RESPONSE, DISCLAIMER, compose


def request(**overrides) -> StatementRequest:
    fields = dict(
        incident_date="2024-01-10",
        location="本社会議室",
        perpetrator="直属の上司（課長）",
        behavior="約2時間にわたり、同僚5名の前で大声で叱責された。",
        witnesses="同僚A、同僚B",
        diagnosis="適応障害",
    )
    fields.update(overrides)
    return StatementRequest(**fields)


def test_missing_company_response_renders_placeholder():
    text = compose(request())

    assert "会社からの謝罪・再発防止措置は一切ありませんでした。" in text
    assert text.split("■ 会社の対応\n", 1)[1].startswith(DEFAULT_COMPANY_RESPONSE)


def test_empty_company_response_also_renders_placeholder():
    assert DEFAULT_COMPANY_RESPONSE in compose(request(company_response=""))


def test_supplied_company_response_replaces_placeholder():
    text = compose(request(company_response="人事部が聞き取りを行ったが処分はなかった。"))

    assert "人事部が聞き取りを行ったが処分はなかった。" in text
    assert DEFAULT_COMPANY_RESPONSE not in text


def test_sections_are_filled_in_order():
    text = compose(request())

    assert "■ 発生日時・場所\n2024-01-10、本社会議室において" in text
    assert "直属の上司（課長）より、以下の行為を受けました。" in text
    assert "目撃者: 同僚A、同僚B" in text
    assert "「適応障害」の診断を受けました。" in text
    headings = ["■ 発生日時・場所", "■ 業務上の出来事", "■ 心理的負荷の評価根拠", "■ 発症との因果関係", "■ 会社の対応"]
    positions = [text.index(h) for h in headings]
    assert positions == sorted(positions)
    assert DISCLAIMER in text


def test_strong_boilerplate_is_always_included():
    text = compose(request(behavior="軽い注意を受けた"))

    assert "心理的負荷の強度は「強」と評価されるべき事案です。" in text


def test_compose_is_deterministic():
    assert compose(request()) == compose(request())
