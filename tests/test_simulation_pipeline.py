"""
End-to-end tests for the day-by-day simulation pipeline and its CLI.
"""

from unittest.mock import patch

import pytest

import main
from gilded_rose import settings
from gilded_rose.items import Item
from gilded_rose.pipelines.simulation import SimulationPipeline


def by_day(snapshots, day):
    return [(s.name, s.sell_in, s.quality) for s in snapshots if s.day == day]


class TestSimulationPipeline:
    def test_default_stock_after_one_day(self, isolated_settings):
        snapshots = SimulationPipeline(days=1, test_mode=True).run()

        assert by_day(snapshots, 0) == list(settings.DEFAULT_INVENTORY)
        assert by_day(snapshots, 1) == [
            ("+5 Dexterity Vest", 9, 19),
            ("Aged Brie", 1, 0),
            ("Elixir of the Mongoose", 4, 6),
            ("Sulfuras, Hand of Ragnaros", 0, 80),
            ("Sulfuras, Hand of Ragnaros", -1, 80),
            ("Backstage passes to a TAFKAL80ETC concert", 14, 21),
            ("Backstage passes to a TAFKAL80ETC concert", 9, 50),
            ("Backstage passes to a TAFKAL80ETC concert", 4, 50),
            ("Conjured", 2, 4),
        ]

    def test_caller_items_are_mutated_in_place(self, isolated_settings):
        brie = Item("Aged Brie", 120, 20)

        snapshots = SimulationPipeline(days=10, items=[brie], test_mode=True).run()

        assert brie.quality == 30
        assert len(snapshots) == 11
        assert [s.day for s in snapshots] == list(range(11))

    def test_reads_seed_file_from_input_dir(self, isolated_settings):
        settings.INPUT_DIR.mkdir()
        (settings.INPUT_DIR / settings.ITEMS_FILENAME).write_text(
            "Name,Sell In,Quality\nConjured,1,10\n", encoding="utf-8"
        )

        pipeline = SimulationPipeline(days=2, test_mode=True)
        snapshots = pipeline.run()

        assert by_day(snapshots, 2) == [("Conjured", -1, 4)]
        assert pipeline.metadata["source"] == settings.ITEMS_FILENAME

    def test_saves_report(self, isolated_settings):
        SimulationPipeline(days=0, test_mode=True).run()

        reports = list(settings.OUTPUT_DIR.glob(f"{settings.REPORT_FILENAME_BASE}_*.csv"))
        assert len(reports) == 1

    def test_missing_explicit_input_fails(self, isolated_settings, tmp_path):
        pipeline = SimulationPipeline(days=1, input_path=tmp_path / "missing.csv", test_mode=True)
        assert pipeline.run() is None

    def test_empty_stock_is_a_successful_run(self, isolated_settings):
        assert SimulationPipeline(days=3, items=[], test_mode=True).run() == []
        assert not settings.OUTPUT_DIR.exists()

    def test_days_default_read_at_construction(self, isolated_settings, monkeypatch):
        monkeypatch.setattr(settings, "DEFAULT_DAYS", 4)

        pipeline = SimulationPipeline(items=[Item("foo", 5, 5)], test_mode=True)
        snapshots = pipeline.run()

        assert pipeline.days == 4
        assert by_day(snapshots, 4) == [("foo", 1, 1)]

    def test_negative_days_rejected(self):
        with pytest.raises(ValueError):
            SimulationPipeline(days=-1)

    def test_posts_outside_test_mode(self, isolated_settings):
        with patch("gilded_rose.pipeline.data_handler.post_to_webhook") as post:
            SimulationPipeline(days=1, items=[Item("foo", 1, 1)]).run()

        post.assert_called_once()
        assert post.call_args.kwargs["report_type"] == "inventory"
        assert post.call_args.kwargs["metadata"]["days"] == 1

    def test_logs_daily_text_report(self, isolated_settings, caplog):
        with caplog.at_level("INFO", logger="gilded_rose"):
            SimulationPipeline(days=1, items=[Item("foo", 1, 1)], test_mode=True).run()

        assert "-------- day 1 --------" in caplog.messages
        assert "name, sellIn, quality" in caplog.messages
        assert "foo, 0, 0" in caplog.messages


class TestMain:
    def test_runs_default_stock(self, isolated_settings):
        assert main.main(["--days", "3", "--test-mode"]) == 0
        assert list(settings.OUTPUT_DIR.glob("*.csv"))

    def test_rejects_negative_days(self, isolated_settings, capsys):
        with pytest.raises(SystemExit) as exc:
            main.main(["--days", "-2"])
        assert exc.value.code == 2
        assert "--days must be zero or more" in capsys.readouterr().err

    def test_header_only_seed_file_succeeds(self, isolated_settings, tmp_path):
        seed = tmp_path / "empty.csv"
        seed.write_text("Name,Sell In,Quality\n", encoding="utf-8")
        assert main.main(["--input", str(seed), "--test-mode"]) == 0

    def test_missing_input_file(self, isolated_settings, tmp_path):
        assert main.main(["--input", str(tmp_path / "missing.csv"), "--test-mode"]) == 1
