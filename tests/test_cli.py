import pytest
from click.testing import CliRunner

from brokerage.cli import cli
from brokerage.db.seed_data import SAMPLE_PROPERTIES
from brokerage.services import kv_store, notification_service


class TestSeedProperties:
    def test_seeds_once(self, db):
        runner = CliRunner()

        first = runner.invoke(cli, ["seed-properties"])
        assert first.exit_code == 0, first.output
        assert f"Seeded {len(SAMPLE_PROPERTIES)} listing(s)" in first.output

        second = runner.invoke(cli, ["seed-properties"])
        assert second.exit_code == 0
        assert "Seeded 0 listing(s)" in second.output

        stored = kv_store.get_by_prefix(db, "property_")
        assert len(stored) == len(SAMPLE_PROPERTIES)
        assert {p["title"] for p in stored} == {s["title"] for s in SAMPLE_PROPERTIES}


class TestListAdmins:
    def test_prints_normalized_allow_list(self):
        result = CliRunner().invoke(cli, ["list-admins"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["admin@letify.test", "owner@letify.test"]


class TestPurgeNotifications:
    def test_removes_only_old_notifications(self, db):
        kv_store.set(db, "admin_notification_old", {
            "id": "admin_notification_old", "title": "t", "body": "b",
            "createdAt": "2020-01-01T00:00:00.000Z",
        })
        kv_store.set(db, "notification_u1_old", {
            "id": "notification_u1_old", "userId": "u1", "title": "t", "body": "b",
            "createdAt": "2020-01-01T00:00:00.000Z",
        })
        fresh = notification_service.notify_admins(db, "t", "b")

        result = CliRunner().invoke(cli, ["purge-notifications", "--older-than-days", "30", "--yes"])
        assert result.exit_code == 0, result.output
        assert "Removed 2 notification(s)" in result.output

        remaining = kv_store.get_by_prefix(db, "admin_notification_")
        assert [n["id"] for n in remaining] == [fresh["id"]]
        assert kv_store.get_by_prefix(db, "notification_") == []

    def test_rejects_non_positive_days(self):
        result = CliRunner().invoke(cli, ["purge-notifications", "--older-than-days", "0", "--yes"])
        assert result.exit_code != 0

    def test_invalid_cutoff(self, db):
        with pytest.raises(ValueError):
            notification_service.purge_older_than(db, "yesterday")
