"""
tests.server.conftest

In-process stand-in for BlackLab Server, served through FastAPI's TestClient.
Overrides the bls_snapshots plugin fixtures so URL cases never leave the process.
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.testclient import TestClient

from bls_snapshots.contracts.snapshot_policy import SnapshotPolicy
from bls_snapshots.settings import Settings

_build_counter = {"n": 0}


def create_fake_bls_app() -> FastAPI:
    app = FastAPI(title="fake-blacklab-server")

    @app.get("/")
    def server_info():
        # Build time changes on every call, like a freshly restarted server.
        _build_counter["n"] += 1
        return {
            "blacklabBuildTime": f"2026-10-19 13:{_build_counter['n']:02d}:00",
            "blacklabVersion": "4.0.0-SNAPSHOT",
            "indices": {"test": {"displayName": "Test", "status": "available", "timeModified": "now"}},
            "cacheStatus": "MISS",
        }

    @app.get("/test/hits")
    def hits(patt: str = ""):
        return {
            "summary": {
                "searchParam": {"indexname": "test", "patt": patt},
                "searchTime": 17,
                "countTime": 3,
                "numberOfHits": 2,
            },
            "hits": [{"docPid": "0", "start": 1, "end": 2}, {"docPid": "1", "start": 4, "end": 5}],
            "docInfos": {"0": {"fromInputFile": "/input/PBsample.xml"}, "1": {"fromInputFile": "/input/other.xml"}},
        }

    @app.get("/echo-accept")
    def echo_accept(request: Request):
        return {"accept": request.headers.get("accept")}

    @app.get("/missing-index/hits")
    def missing_index():
        return JSONResponse(status_code=404, content={"error": {"code": "CANNOT_OPEN_INDEX"}})

    return app


@pytest.fixture()
def bls_client():
    with TestClient(create_fake_bls_app()) as client:
        yield client


@pytest.fixture()
def bls_settings(snapshot_root) -> Settings:
    return Settings(saved_responses_path=snapshot_root, save_missing_responses=True)


@pytest.fixture()
def snapshot_store(store):
    return store


@pytest.fixture()
def snapshot_policy() -> SnapshotPolicy:
    return SnapshotPolicy.WRITE_IF_MISSING
