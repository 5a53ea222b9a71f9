from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()

SERVER_NAME = "japan-legal-mcp-server"
SERVER_VERSION = "1.0.0"
SERVER_DESCRIPTION = "日本の法律・判例・労災認定基準データベースMCPサーバー"

HOST = os.getenv("JAPAN_LEGAL_HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
MCP_TRANSPORT = os.getenv("MCP_TRANSPORT", "streamable-http")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# 外部サイトへのリクエスト設定
FETCH_TIMEOUT_MS = int(os.getenv("FETCH_TIMEOUT_MS", "15000"))
FETCH_USER_AGENT = os.getenv(
    "FETCH_USER_AGENT", "Mozilla/5.0 (compatible; JapanLegalMCP/1.0)"
)
FETCH_ACCEPT_LANGUAGE = os.getenv("FETCH_ACCEPT_LANGUAGE", "ja,en;q=0.9")


def default_headers() -> dict[str, str]:
    return {
        "User-Agent": FETCH_USER_AGENT,
        "Accept-Language": FETCH_ACCEPT_LANGUAGE,
    }
