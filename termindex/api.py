from __future__ import annotations

import logging
import secrets
import threading
from typing import Any

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from pydantic import BaseModel, Field

from .config import Settings, get_settings
from .corpus import load_docs_from_dir
from .indexer import InvertedIndex, build_index, build_index_with_ids
from .searcher import Searcher

logger = logging.getLogger(__name__)

app = FastAPI(title="termindex", version="1.0.0")

_SETTINGS: Settings = get_settings()


def get_index_instance(settings: Settings) -> InvertedIndex:
    """Build the startup index from the data dir, or an empty one."""
    folder = settings.data_dir
    if not folder.is_dir():
        logger.warning("Data dir %s not found; starting with an empty index", folder)
        return InvertedIndex()
    docs = load_docs_from_dir(folder)
    if not docs:
        logger.warning("No .txt files in %s; starting with an empty index", folder)
        return InvertedIndex()
    return build_index(text for _, text in docs)


# Readers only ever see a fully committed index: builds happen outside the
# lock and the finished index is swapped in under it.
_INDEX_LOCK = threading.Lock()
_INDEX_CACHE: InvertedIndex = get_index_instance(_SETTINGS)


def publish_index(idx: InvertedIndex) -> None:
    global _INDEX_CACHE
    with _INDEX_LOCK:
        _INDEX_CACHE = idx
    logger.info(
        "Published index: %d docs, vocabulary size %d",
        len(idx.doc_ids),
        idx.vocabulary_size(),
    )


def current_index() -> InvertedIndex:
    with _INDEX_LOCK:
        return _INDEX_CACHE


# Basic auth: enabled only when both user and password are configured.
security = HTTPBasic(auto_error=False)


def _check_auth(credentials: HTTPBasicCredentials | None = Depends(security)) -> None:
    if not _SETTINGS.auth_enabled:
        return
    if credentials is None:
        raise HTTPException(status_code=401, detail="Credentials are required")
    user_ok = secrets.compare_digest(
        credentials.username.encode("utf-8"), _SETTINGS.basic_user.encode("utf-8")
    )
    pass_ok = secrets.compare_digest(
        credentials.password.encode("utf-8"), _SETTINGS.basic_pass.encode("utf-8")
    )
    if not (user_ok and pass_ok):
        raise HTTPException(status_code=401, detail="Invalid credentials")


# --- models ---
class TextsIn(BaseModel):
    docs: list[str]


class TermsIn(BaseModel):
    docs: dict[int, list[str]]


class IndexOut(BaseModel):
    ok: bool
    indexed: int
    vocab: int


class SearchOut(BaseModel):
    term: str
    found: bool
    document_ids: list[Any] = Field(default_factory=list)


class PostingOut(BaseModel):
    term: str
    document_frequency: int
    document_ids: list[Any]


class PostingsOut(BaseModel):
    postings: list[PostingOut]


def _index_out(idx: InvertedIndex) -> IndexOut:
    return IndexOut(ok=True, indexed=len(idx.doc_ids), vocab=idx.vocabulary_size())


@app.get("/")
def root_status() -> dict[str, Any]:
    idx = current_index()
    return {"ok": True, "docs": len(idx.doc_ids), "vocab": idx.vocabulary_size()}


@app.post("/index", response_model=IndexOut, dependencies=[Depends(_check_auth)])
def index_texts(payload: TextsIn) -> IndexOut:
    """Index raw texts; ids are their positions in `docs`."""
    idx = build_index(payload.docs)
    publish_index(idx)
    return _index_out(idx)


@app.post("/index-terms", response_model=IndexOut, dependencies=[Depends(_check_auth)])
def index_terms(payload: TermsIn) -> IndexOut:
    """Index pre-tokenized documents under caller ids."""
    idx = build_index_with_ids(payload.docs)
    publish_index(idx)
    return _index_out(idx)


@app.get("/search", response_model=SearchOut, dependencies=[Depends(_check_auth)])
def search_endpoint(q: str = Query(..., min_length=1)) -> SearchOut:
    result = Searcher(current_index()).find(q)
    return SearchOut(term=q, found=result.found, document_ids=list(result.document_ids))


@app.get("/postings", response_model=PostingsOut, dependencies=[Depends(_check_auth)])
def list_postings() -> PostingsOut:
    return PostingsOut(
        postings=[
            PostingOut(
                term=e.term,
                document_frequency=e.document_frequency,
                document_ids=list(e.document_ids),
            )
            for e in current_index()
        ]
    )
