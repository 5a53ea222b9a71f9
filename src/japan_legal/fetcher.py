from __future__ import annotations

import logging
import threading
from typing import Any

import requests
from requests.compat import chardet

from . import config
from .models import RetrievalRequest, RetrievedDocument

logger = logging.getLogger(__name__)

CHUNK_SIZE = 8192


class FetchError(Exception):
    """外部ページの取得に失敗した（タイムアウト・通信エラー・非2xx応答）。"""

    def __init__(self, url: str, cause: Exception):
        super().__init__(f"{type(cause).__name__}: {cause}")
        self.url = url
        self.cause = cause


def _decode(body: bytes, declared: str | None) -> str:
    encoding = declared
    # charset 未指定の日本語ページが ISO-8859-1 扱いで文字化けするのを防ぐ
    if not encoding or encoding.lower() == "iso-8859-1":
        encoding = chardet.detect(body)["encoding"] or "utf-8"
    return str(body, encoding, errors="replace")


def _download(request: RetrievalRequest, outcome: dict[str, Any], abandoned: threading.Event) -> None:
    try:
        response = requests.get(
            request.url,
            headers=request.headers,
            timeout=request.timeout_ms / 1000,
            stream=True,
        )
        outcome["response"] = response
        with response:
            response.raise_for_status()
            chunks: list[bytes] = []
            for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                if abandoned.is_set():
                    return
                chunks.append(chunk)
            body = b"".join(chunks)
            outcome["document"] = RetrievedDocument(
                raw_markup=_decode(body, response.encoding), source_url=request.url
            )
            logger.info(f"Fetched {request.url} ({response.status_code}, {len(body)} bytes)")
    except Exception as e:
        if not abandoned.is_set():
            outcome["error"] = e


def fetch(request: RetrievalRequest) -> RetrievedDocument:
    """1回だけ取得する。リトライはせず、失敗は FetchError として呼び出し元へ返す。

    timeout_ms は接続から本文の読み終わりまでの合計時間の上限。超えた時点で
    レスポンスを閉じて処理を打ち切る。
    """
    outcome: dict[str, Any] = {}
    abandoned = threading.Event()
    worker = threading.Thread(
        target=_download, args=(request, outcome, abandoned), daemon=True
    )
    worker.start()
    worker.join(request.timeout_ms / 1000)

    if worker.is_alive():
        abandoned.set()
        response = outcome.get("response")
        if response is not None:
            response.close()
        error = requests.Timeout(f"no complete response within {request.timeout_ms} ms")
        logger.warning(f"Fetch abandoned for {request.url}: {error}")
        raise FetchError(request.url, error)

    error = outcome.get("error")
    if isinstance(error, requests.RequestException):
        logger.warning(f"Fetch failed for {request.url}: {error}")
        raise FetchError(request.url, error) from error
    if error is not None:
        raise error
    return outcome["document"]


def fetch_page(url: str) -> RetrievedDocument:
    return fetch(
        RetrievalRequest(
            url=url,
            timeout_ms=config.FETCH_TIMEOUT_MS,
            headers=config.default_headers(),
        )
    )
