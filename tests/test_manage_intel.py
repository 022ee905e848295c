"""Tests for the intel maintenance CLI."""
from __future__ import annotations

import asyncio
import json
from datetime import datetime, timedelta, timezone

import pytest

from frontier_intel.database import Repository, RepositoryConfig
from frontier_intel.intel import IntelEntity, IntelItem, RiftIntel
from frontier_intel.tools import manage_intel


@pytest.fixture(autouse=True)
def reset_env(monkeypatch):
    monkeypatch.delenv("FRONTIER_INTEL_DB", raising=False)
    monkeypatch.delenv("FRONTIER_INTEL_EXPIRATION_HOURS", raising=False)
    yield


def _seed(db_path, *ages_hours: float) -> list[str]:
    async def _run() -> list[str]:
        repository = Repository()
        await repository.initialize(RepositoryConfig(database_path=db_path))
        ids = []
        for index, age in enumerate(ages_hours):
            stamp = (datetime.now(timezone.utc) - timedelta(hours=age)).isoformat()
            item = IntelItem(
                id=f"rift-seed{index:05d}",
                timestamp=stamp,
                reporter="7",
                content=RiftIntel("A", "S", ""),
            )
            await repository.store(IntelEntity(guild_id="G1", intel_item=item))
            ids.append(item.id)
        return ids

    return asyncio.run(_run())


def test_types_command(capsys):
    manage_intel.main(["types"])
    out = capsys.readouterr().out
    assert "rift: Add a rift intel report" in out
    assert "site: Add a site intel report" in out


def test_list_command_json(tmp_path, capsys):
    db_path = tmp_path / "db.json"
    ids = _seed(db_path, 1, 2)

    manage_intel.main(["--db", str(db_path), "list", "G1", "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert [row["intelItem"]["id"] for row in payload] == ids


def test_purge_command(tmp_path, capsys):
    db_path = tmp_path / "db.json"
    _seed(db_path, 1, 500)

    manage_intel.main(["--db", str(db_path), "purge", "G1"])

    assert "Purged 1 stale report(s)." in capsys.readouterr().out


def test_delete_command(tmp_path, capsys):
    db_path = tmp_path / "db.json"
    ids = _seed(db_path, 1)

    manage_intel.main(["--db", str(db_path), "delete", "G1", "rift", ids[0]])
    assert "Deleted." in capsys.readouterr().out

    manage_intel.main(["--db", str(db_path), "delete", "G1", "rift", ids[0]])
    assert f"No intel report with id {ids[0]}." in capsys.readouterr().out
