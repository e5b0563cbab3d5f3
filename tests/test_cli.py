# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Tests for the earthview command-line interface.
"""
import csv
import json
import sys

import pytest

from earthview.cli import main


def _run(monkeypatch, *args):
    monkeypatch.setattr(sys, 'argv', ['earthview', *args])
    main()


def _write_config(tmp_path, data):
    path = tmp_path / "scene.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


class TestCliSummary:

    def test_prints_frame_summary(self, monkeypatch, capsys):
        _run(monkeypatch, '--at', '2026-06-21T12:00:00Z', '-q')
        out = capsys.readouterr().out
        assert "Julian day:      2461213" in out
        assert "Sun  RA/Dec:" in out
        assert "Tracked object:" in out
        assert "Trajectory:      94 points" in out

    def test_exports(self, monkeypatch, capsys, tmp_path):
        frame_path = tmp_path / "frame.json"
        track_path = tmp_path / "track.csv"
        _run(monkeypatch, '--at', '2026-06-21T12:00:00Z',
             '--export-json', str(frame_path), '--export-csv', str(track_path))
        data = json.loads(frame_path.read_text(encoding="utf-8"))
        assert data["time"] == "2026-06-21T12:00:00+00:00"
        with open(track_path, newline="", encoding="utf-8") as f:
            assert len(list(csv.reader(f))) == 95
        out = capsys.readouterr().out
        assert "Exported 94 ground-track points" in out

    def test_config_file(self, monkeypatch, capsys, tmp_path):
        path = _write_config(tmp_path, {
            "trajectory_duration_s": 600,
            "tracked_state": {
                "r": [7000.0, 0.0, 0.0],
                "v": [0.0, 7.546, 0.0],
                "epoch": "2026-06-21T00:00:00Z",
            },
        })
        _run(monkeypatch, '-c', path, '--at', '2026-06-21T12:00:00Z')
        out = capsys.readouterr().out
        assert "Trajectory:      11 points" in out
        assert "lat 0.0000 deg" in out or "lat -0.0000 deg" in out

    def test_headless_frames_without_textures(self, monkeypatch, capsys, tmp_path):
        path = _write_config(tmp_path, {
            "n_lon": 8,
            "n_lat": 4,
            "trajectory_duration_s": 0,
            "day_texture": str(tmp_path / "missing_day.jpg"),
            "night_texture": str(tmp_path / "missing_night.jpg"),
        })
        _run(monkeypatch, '-c', path, '--at', '2026-06-21T12:00:00Z', '--frames', '2', '-q')
        assert "Frame loop: 0/2 frames drawn" in capsys.readouterr().out


class TestCliErrors:

    def test_missing_config(self, monkeypatch, capsys, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            _run(monkeypatch, '-c', str(tmp_path / "nonexistent.json"))
        assert exc_info.value.code == 1
        assert "not found" in capsys.readouterr().err.lower()

    def test_invalid_config(self, monkeypatch, capsys, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{oops", encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            _run(monkeypatch, '-c', str(path))
        assert exc_info.value.code == 1
        assert "Invalid config file" in capsys.readouterr().err

    def test_config_path_is_directory(self, monkeypatch, capsys, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            _run(monkeypatch, '-c', str(tmp_path))
        assert exc_info.value.code == 1
        assert "Invalid config file" in capsys.readouterr().err

    def test_config_rejected_value(self, monkeypatch, capsys, tmp_path):
        path = _write_config(tmp_path, {"invert_texture_latitude": "false"})
        with pytest.raises(SystemExit) as exc_info:
            _run(monkeypatch, '-c', path)
        assert exc_info.value.code == 1
        assert "invert_texture_latitude" in capsys.readouterr().err

    def test_invalid_time(self, monkeypatch, capsys):
        with pytest.raises(SystemExit) as exc_info:
            _run(monkeypatch, '--at', 'yesterday')
        assert exc_info.value.code == 1
        assert "--at" in capsys.readouterr().err

    def test_open_orbit_rejected(self, monkeypatch, capsys, tmp_path):
        path = _write_config(tmp_path, {
            "tracked_state": {
                "r": [7000.0, 0.0, 0.0],
                "v": [0.0, 12.0, 0.0],
                "epoch": "2026-06-21T00:00:00Z",
            },
        })
        with pytest.raises(SystemExit) as exc_info:
            _run(monkeypatch, '-c', path, '--at', '2026-06-21T12:00:00Z')
        assert exc_info.value.code == 1
        assert "not closed" in capsys.readouterr().err

    def test_invalid_aspect(self, monkeypatch, capsys):
        with pytest.raises(SystemExit) as exc_info:
            _run(monkeypatch, '--at', '2026-06-21T12:00:00Z', '--aspect', '0')
        assert exc_info.value.code == 1
        assert "Aspect" in capsys.readouterr().err
