import asyncio

from japan_legal.server import mcp

TOOL_NAMES = {
    "search_harassment_cases",
    "search_labor_insurance_decisions",
    "search_court_cases",
    "get_psychological_load_criteria",
    "search_law",
    "search_labor_standard_cases",
    "generate_rousai_statement",
}


def list_tools():
    return {tool.name: tool for tool in asyncio.run(mcp.list_tools())}


def test_registers_all_tools():
    assert set(list_tools()) == TOOL_NAMES


def test_tool_schemas_mark_required_arguments():
    tools = list_tools()

    assert tools["search_harassment_cases"].inputSchema["required"] == ["category"]
    assert set(tools["generate_rousai_statement"].inputSchema["required"]) == {
        "incident_date",
        "location",
        "perpetrator",
        "behavior",
        "witnesses",
        "diagnosis",
    }
    assert (
        tools["search_court_cases"].inputSchema["properties"]["case_type"]["description"]
        == "事件類型（労働、行政、民事など）"
    )


def test_tool_annotations():
    tools = list_tools()

    assert tools["search_law"].annotations.readOnlyHint is True
    assert tools["get_psychological_load_criteria"].annotations.openWorldHint is False
    assert tools["generate_rousai_statement"].annotations.readOnlyHint is False
    assert tools["search_harassment_cases"].title == "パワハラ・ハラスメント裁判例検索"
