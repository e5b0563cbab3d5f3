# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Tests for JSON scene configuration reading.
"""
import json
import logging
from datetime import datetime, timezone

import pytest

from earthview.adapters.json_io import JsonConfigReader, config_from_dict, parse_state_vector
from earthview.domain.scene_config import DEFAULT_TRACKED_STATE, SceneConfig


def _write(tmp_path, data, name="scene.json"):
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


class TestJsonConfigReader:

    def test_empty_object_gives_defaults(self, tmp_path):
        assert JsonConfigReader().read_config(_write(tmp_path, {})) == SceneConfig()

    def test_reads_scalars(self, tmp_path):
        path = _write(tmp_path, {
            "n_lon": 64,
            "n_lat": 32,
            "ellipsoid_b": 1.99,
            "day_texture": "day.png",
            "invert_texture_latitude": False,
            "trajectory_duration_s": 3000,
        })
        config = JsonConfigReader().read_config(path)
        assert (config.n_lon, config.n_lat) == (64, 32)
        assert config.ellipsoid_b == 1.99
        assert config.day_texture == "day.png"
        assert config.night_texture == SceneConfig().night_texture
        assert config.invert_texture_latitude is False
        assert isinstance(config.trajectory_duration_s, float)
        assert config.trajectory_duration_s == 3000.0

    def test_reads_tracked_state(self, tmp_path):
        path = _write(tmp_path, {
            "tracked_state": {
                "r": [7000, 0, 0],
                "v": [0.0, 7.5, 0.0],
                "epoch": "2026-03-20T12:00:00Z",
            },
        })
        state = JsonConfigReader().read_config(path).tracked_state
        assert state.r == (7000.0, 0.0, 0.0)
        assert state.v == (0.0, 7.5, 0.0)
        assert state.epoch == datetime(2026, 3, 20, 12, 0, 0, tzinfo=timezone.utc)

    def test_root_must_be_object(self, tmp_path):
        with pytest.raises(ValueError, match="object"):
            JsonConfigReader().read_config(_write(tmp_path, [1, 2, 3]))

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            JsonConfigReader().read_config(str(path))

    def test_unknown_key_warns(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING, logger="earthview.adapters.json_io"):
            config = JsonConfigReader().read_config(_write(tmp_path, {"n_lonn": 10}))
        assert config == SceneConfig()
        assert "n_lonn" in caplog.text


class TestParseStateVector:

    def test_naive_epoch_treated_as_utc(self):
        state = parse_state_vector({"r": [1, 2, 3], "v": [4, 5, 6], "epoch": "2026-01-01T00:00:00"})
        assert state.epoch.tzinfo is not None
        assert state.epoch == DEFAULT_TRACKED_STATE.epoch

    def test_missing_key(self):
        with pytest.raises(ValueError, match="epoch"):
            parse_state_vector({"r": [1, 2, 3], "v": [4, 5, 6]})

    @pytest.mark.parametrize("bad", [[1, 2], "123", [1, "x", 3], None])
    def test_bad_vector(self, bad):
        with pytest.raises(ValueError):
            parse_state_vector({"r": bad, "v": [4, 5, 6], "epoch": "2026-01-01T00:00:00Z"})

    def test_bad_scalar_type(self):
        with pytest.raises(ValueError):
            config_from_dict({"n_lon": "many"})


class TestConfigValidation:

    @pytest.mark.parametrize("value", ["false", 0, 1, None])
    def test_bool_field_requires_json_boolean(self, value):
        with pytest.raises(ValueError, match="invert_texture_latitude"):
            config_from_dict({"invert_texture_latitude": value})

    @pytest.mark.parametrize("value", [150.9, True, "150", None])
    def test_int_field_rejects_non_integral(self, value):
        with pytest.raises(ValueError, match="n_lon"):
            config_from_dict({"n_lon": value})

    def test_int_field_accepts_integral_float(self):
        config = config_from_dict({"n_lat": 64.0})
        assert config.n_lat == 64
        assert isinstance(config.n_lat, int)

    @pytest.mark.parametrize("value", [True, "60", float("nan"), float("inf")])
    def test_float_field_rejects_non_numbers(self, value):
        with pytest.raises(ValueError, match="trajectory_step_s"):
            config_from_dict({"trajectory_step_s": value})

    def test_string_field_rejects_number(self):
        with pytest.raises(ValueError, match="day_texture"):
            config_from_dict({"day_texture": 42})

    @pytest.mark.parametrize("key", ["n_lon", "n_lat", "ellipsoid_a", "ellipsoid_b", "trajectory_step_s"])
    @pytest.mark.parametrize("value", [0, -60])
    def test_non_positive_rejected(self, key, value):
        with pytest.raises(ValueError, match=f"'{key}' must be positive"):
            config_from_dict({key: value})

    def test_negative_duration_rejected(self):
        with pytest.raises(ValueError, match="trajectory_duration_s"):
            config_from_dict({"trajectory_duration_s": -1.0})

    def test_zero_duration_allowed(self):
        assert config_from_dict({"trajectory_duration_s": 0}).trajectory_duration_s == 0.0

    def test_tracked_state_must_be_object(self):
        with pytest.raises(ValueError, match="tracked_state"):
            config_from_dict({"tracked_state": [7000.0, 0.0, 0.0]})

    def test_rejection_raised_by_reader(self, tmp_path):
        path = _write(tmp_path, {"trajectory_step_s": 0})
        with pytest.raises(ValueError, match="trajectory_step_s"):
            JsonConfigReader().read_config(path)
