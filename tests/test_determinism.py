"""
Determinism tests — verify that the same inventory always ages the same way.
"""
import json

import pytest

from quality_engine.inventory import compute_inventory_hash, load_inventory, save_inventory
from quality_engine.models import Item
from quality_engine.simulation import replay_simulation, run_simulation


@pytest.fixture
def sample_inventory_file(tmp_path):
    """Create a small deterministic inventory file."""
    items = [
        {"name": "Default", "quality": 10, "days_remaining": 5},
        {"name": "Blue cheese", "quality": 10, "days_remaining": 2},
        {"name": "Concert tickets", "quality": 20, "days_remaining": 15},
        {"name": "Mjolnir", "quality": 5, "days_remaining": 3},
        {"name": "Magic Sword", "quality": 10, "days_remaining": 1},
        {"name": "Bread", "quality": 60, "days_remaining": 4},
    ]
    path = tmp_path / "inventory.json"
    with open(path, "w") as f:
        json.dump({"items": items}, f)
    return str(path)


class TestDeterminism:
    def test_same_inventory_same_hash(self, sample_inventory_file, tmp_path):
        """Simulate the same inventory twice → identical hashes."""
        hash1 = run_simulation(
            sample_inventory_file, 7,
            str(tmp_path / "report1.jsonl"), str(tmp_path / "out1.json"),
        )
        hash2 = run_simulation(
            sample_inventory_file, 7,
            str(tmp_path / "report2.jsonl"), str(tmp_path / "out2.json"),
        )
        assert hash1 == hash2

    def test_reports_identical(self, sample_inventory_file, tmp_path):
        """Reports from two runs are byte-identical."""
        report1 = str(tmp_path / "report1.jsonl")
        report2 = str(tmp_path / "report2.jsonl")
        run_simulation(sample_inventory_file, 7, report1, str(tmp_path / "out1.json"))
        run_simulation(sample_inventory_file, 7, report2, str(tmp_path / "out2.json"))

        with open(report1) as f1, open(report2) as f2:
            assert f1.read() == f2.read()

    def test_report_line_per_item_per_day(self, sample_inventory_file, tmp_path):
        report = str(tmp_path / "report.jsonl")
        run_simulation(sample_inventory_file, 3, report, str(tmp_path / "out.json"))

        with open(report) as f:
            records = [json.loads(line) for line in f]
        assert len(records) == 18
        assert [r["day"] for r in records[:6]] == [1] * 6
        assert records[-1]["day"] == 3
        # Bread arrived at 60: clamped on day 1, decays normally after
        bread = [r for r in records if r["name"] == "Bread"]
        assert bread[0]["flags"] == ["QUALITY_CLAMPED"]
        assert [r["quality"] for r in bread] == [50, 49, 48]

    def test_final_inventory_matches_hash(self, sample_inventory_file, tmp_path):
        out = str(tmp_path / "out.json")
        final_hash = run_simulation(
            sample_inventory_file, 2, str(tmp_path / "report.jsonl"), out,
        )
        items = load_inventory(out)
        assert compute_inventory_hash(items) == final_hash
        assert items[0].to_dict() == {"name": "Default", "quality": 8, "days_remaining": 3}
        assert items[3].to_dict() == {"name": "Mjolnir", "quality": 80, "days_remaining": 3}

    def test_zero_days_is_identity(self, sample_inventory_file, tmp_path):
        final_hash = run_simulation(
            sample_inventory_file, 0,
            str(tmp_path / "report.jsonl"), str(tmp_path / "out.json"),
        )
        assert final_hash == compute_inventory_hash(load_inventory(sample_inventory_file))

    def test_negative_days_rejected(self, sample_inventory_file, tmp_path):
        with pytest.raises(ValueError, match="days"):
            run_simulation(
                sample_inventory_file, -1,
                str(tmp_path / "report.jsonl"), str(tmp_path / "out.json"),
            )

    def test_replay_matches(self, sample_inventory_file, tmp_path):
        """Simulate → save hash → replay → hashes match."""
        final_hash = run_simulation(
            sample_inventory_file, 10,
            str(tmp_path / "report.jsonl"), str(tmp_path / "out.json"),
        )
        hash_path = tmp_path / "expected_hash.txt"
        hash_path.write_text(final_hash + "\n")

        assert replay_simulation(
            sample_inventory_file, 10,
            str(tmp_path / "replay_report.jsonl"), str(tmp_path / "replay_out.json"),
            str(hash_path),
        )

    def test_replay_fails_on_wrong_hash(self, sample_inventory_file, tmp_path):
        """Replay with wrong hash → should fail."""
        hash_path = tmp_path / "wrong_hash.txt"
        hash_path.write_text("0" * 64)

        assert not replay_simulation(
            sample_inventory_file, 10,
            str(tmp_path / "replay_report.jsonl"), str(tmp_path / "replay_out.json"),
            str(hash_path),
        )

    def test_replay_fails_on_different_day_count(self, sample_inventory_file, tmp_path):
        final_hash = run_simulation(
            sample_inventory_file, 3,
            str(tmp_path / "report.jsonl"), str(tmp_path / "out.json"),
        )
        hash_path = tmp_path / "expected_hash.txt"
        hash_path.write_text(final_hash)

        assert not replay_simulation(
            sample_inventory_file, 4,
            str(tmp_path / "replay_report.jsonl"), str(tmp_path / "replay_out.json"),
            str(hash_path),
        )


class TestInventoryFile:
    def test_round_trip_keeps_order(self, tmp_path):
        items = [Item("Bread", 3, 1), Item("Mjolnir", 80, 0)]
        path = str(tmp_path / "inv.json")
        saved_hash = save_inventory(items, path)
        loaded = load_inventory(path)
        assert loaded == items
        assert compute_inventory_hash(loaded) == saved_hash

    def test_hash_depends_on_order(self):
        a, b = Item("Bread", 3, 1), Item("Milk", 3, 1)
        assert compute_inventory_hash([a, b]) != compute_inventory_hash([b, a])

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_inventory(str(tmp_path / "nope.json"))

    def test_not_json(self, tmp_path):
        path = tmp_path / "inv.json"
        path.write_text("{not json")
        with pytest.raises(ValueError, match="not valid JSON"):
            load_inventory(str(path))

    def test_missing_items_list(self, tmp_path):
        path = tmp_path / "inv.json"
        path.write_text(json.dumps({"things": []}))
        with pytest.raises(ValueError, match="'items' list"):
            load_inventory(str(path))

    @pytest.mark.parametrize("bad", [
        {"name": "Bread", "quality": 1},
        {"name": "Bread", "quality": 1.5, "days_remaining": 1},
        {"name": "Bread", "quality": True, "days_remaining": 1},
        {"name": 7, "quality": 1, "days_remaining": 1},
        "Bread",
    ])
    def test_invalid_item_reports_index(self, tmp_path, bad):
        path = tmp_path / "inv.json"
        path.write_text(json.dumps({"items": [
            {"name": "Milk", "quality": 1, "days_remaining": 1}, bad,
        ]}))
        with pytest.raises(ValueError, match="index 1"):
            load_inventory(str(path))
