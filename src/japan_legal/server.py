from __future__ import annotations

from typing import Annotated

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations
from pydantic import Field
from starlette.requests import Request
from starlette.responses import JSONResponse

from . import config, service

mcp = FastMCP(
    config.SERVER_NAME,
    json_response=True,
    stateless_http=True,
    host=config.HOST,
    port=config.PORT,
)

READ_ONLY_WEB = ToolAnnotations(
    readOnlyHint=True, destructiveHint=False, idempotentHint=True, openWorldHint=True
)
READ_ONLY_LOCAL = ToolAnnotations(
    readOnlyHint=True, destructiveHint=False, idempotentHint=True, openWorldHint=False
)


@mcp.custom_route("/", methods=["GET"])
async def server_info(request: Request) -> JSONResponse:
    return JSONResponse(
        {
            "name": config.SERVER_NAME,
            "version": config.SERVER_VERSION,
            "description": config.SERVER_DESCRIPTION,
        }
    )


@mcp.tool(title="パワハラ・ハラスメント裁判例検索", annotations=READ_ONLY_WEB)
def search_harassment_cases(
    category: Annotated[str, Field(description="検索カテゴリ（例: 精神的攻撃、パワハラ、叱責）")],
    keyword: Annotated[str | None, Field(description="追加キーワード（任意）")] = None,
) -> str:
    """厚生労働省「あかるい職場応援団」のハラスメント裁判例データベースを検索します。"""
    return service.search_harassment_cases(category, keyword)


@mcp.tool(title="労働保険審査会 裁決事案検索", annotations=READ_ONLY_WEB)
def search_labor_insurance_decisions(
    keyword: Annotated[str, Field(description="検索キーワード（例: 精神障害、適応障害、パワハラ）")],
) -> str:
    """労働保険審査会の裁決事案一覧を取得します。精神障害の業務起因性が争われた事案に特に有用です。"""
    return service.search_labor_insurance_decisions(keyword)


@mcp.tool(title="裁判所 判例検索", annotations=READ_ONLY_WEB)
def search_court_cases(
    keyword: Annotated[str, Field(description="検索キーワード")],
    case_type: Annotated[str | None, Field(description="事件類型（労働、行政、民事など）")] = None,
) -> str:
    """裁判所公式判例検索システムから判例を検索します。労働・行政・民事事件に対応。"""
    return service.search_court_cases(keyword, case_type)


@mcp.tool(title="心理的負荷評価表・精神障害労災認定基準", annotations=READ_ONLY_LOCAL)
def get_psychological_load_criteria(
    situation: Annotated[str, Field(description="評価したい状況・出来事の説明")],
) -> str:
    """厚労省の認定基準に基づき、特定の状況が「強」「中」「弱」のどの評価に該当するか判定します。"""
    return service.get_psychological_load_criteria(situation)


@mcp.tool(title="e-Gov 法令検索", annotations=READ_ONLY_WEB)
def search_law(
    law_name: Annotated[str, Field(description="法令名または検索キーワード")],
) -> str:
    """e-Govの法令データベースから日本の法律・政令・省令を検索します。"""
    return service.search_law(law_name)


@mcp.tool(title="全労連 労働基準判例検索", annotations=READ_ONLY_WEB)
def search_labor_standard_cases(
    keyword: Annotated[str, Field(description="検索キーワード")],
) -> str:
    """全労連の労働基準判例データベースを検索します。"""
    return service.search_labor_standard_cases(keyword)


@mcp.tool(
    title="労災申請書 業務上の出来事記述支援",
    annotations=ToolAnnotations(
        readOnlyHint=False, destructiveHint=False, idempotentHint=True, openWorldHint=False
    ),
)
def generate_rousai_statement(
    incident_date: Annotated[str, Field(description="出来事の日付")],
    location: Annotated[str, Field(description="場所")],
    perpetrator: Annotated[str, Field(description="行為者（役職・関係）")],
    behavior: Annotated[str, Field(description="行為の内容（詳細に）")],
    witnesses: Annotated[str, Field(description="目撃者情報")],
    diagnosis: Annotated[str, Field(description="診断名")],
    company_response: Annotated[str | None, Field(description="会社の対応（任意）")] = None,
) -> str:
    """精神障害の労災申請書（様式第23号）における「業務上の出来事」の記述文を生成します。"""
    return service.generate_rousai_statement(
        incident_date=incident_date,
        location=location,
        perpetrator=perpetrator,
        behavior=behavior,
        witnesses=witnesses,
        diagnosis=diagnosis,
        company_response=company_response,
    )


if __name__ == "__main__":
    mcp.run(transport="streamable-http")
