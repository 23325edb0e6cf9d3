"""Tests for the simulation configuration system."""

import json

import pytest
from dacite import UnexpectedDataError
from dataclasses import FrozenInstanceError, replace

from src.config import (
    DEFAULT_CONFIG,
    BenchmarkConfig,
    SearchConfig,
    SimulationConfig,
    block_request_hash,
    config_from_dict,
    config_from_json,
    config_hash,
    config_to_dict,
    config_to_json,
    full_config_hash,
    search_config_hash,
)


class TestDefaultConfig:
    """DEFAULT_CONFIG has the expected values."""

    def test_defaults(self):
        assert DEFAULT_CONFIG.search.new_edge_weight == 1
        assert DEFAULT_CONFIG.search.greedy_hub == "smallest"
        assert DEFAULT_CONFIG.search.validate_solutions is True
        assert DEFAULT_CONFIG.benchmark.n_users_values == (6, 9, 12)
        assert DEFAULT_CONFIG.benchmark.n_edges_values == (4, 6, 9)
        assert DEFAULT_CONFIG.benchmark.n_components_values == (2, 3, 3)
        assert DEFAULT_CONFIG.seed == 42


class TestConfigImmutability:
    """Frozen dataclasses prevent mutation."""

    def test_config_frozen(self):
        with pytest.raises(FrozenInstanceError):
            DEFAULT_CONFIG.seed = 99  # type: ignore[misc]

    def test_search_config_frozen(self):
        with pytest.raises(FrozenInstanceError):
            DEFAULT_CONFIG.search.greedy_hub = "largest"  # type: ignore[misc]


class TestConfigValidation:
    """__post_init__ rejects inconsistent parameters."""

    def test_unknown_hub(self):
        with pytest.raises(ValueError, match="greedy_hub"):
            SimulationConfig(search=SearchConfig(greedy_hub="median"))

    def test_negative_edge_weight(self):
        with pytest.raises(ValueError, match="new_edge_weight"):
            SimulationConfig(search=SearchConfig(new_edge_weight=-2))

    def test_benchmark_lengths_must_match(self):
        with pytest.raises(ValueError, match="equal length"):
            SimulationConfig(benchmark=BenchmarkConfig(n_users_values=(6, 9)))

    def test_benchmark_components_bounded(self):
        with pytest.raises(ValueError, match="n_components"):
            SimulationConfig(
                benchmark=BenchmarkConfig(
                    n_users_values=(3,), n_edges_values=(2,), n_components_values=(4,)
                )
            )


class TestConfigRoundTrip:
    """JSON serialization round-trip preserves identity."""

    def test_round_trip_hash(self):
        restored = config_from_json(config_to_json(DEFAULT_CONFIG))
        assert config_hash(DEFAULT_CONFIG) == config_hash(restored)

    def test_round_trip_tuples(self):
        cfg = replace(DEFAULT_CONFIG, tags=("demo", "ring"))
        restored = config_from_json(config_to_json(cfg))
        assert restored.tags == ("demo", "ring")
        assert isinstance(restored.benchmark.n_users_values, tuple)

    def test_dict_round_trip(self):
        restored = config_from_dict(config_to_dict(DEFAULT_CONFIG))
        assert restored == DEFAULT_CONFIG

    def test_unknown_key_rejected(self):
        data = json.loads(config_to_json(DEFAULT_CONFIG))
        data["search"]["max_depth"] = 3
        with pytest.raises(UnexpectedDataError):
            config_from_json(json.dumps(data))

    def test_invalid_value_rejected_on_load(self):
        data = json.loads(config_to_json(DEFAULT_CONFIG))
        data["search"]["greedy_hub"] = "median"
        with pytest.raises(ValueError, match="greedy_hub"):
            config_from_json(json.dumps(data))


class TestConfigHash:
    """Deterministic hashing."""

    def test_hash_format(self):
        h = config_hash(DEFAULT_CONFIG)
        assert len(h) == 16
        int(h, 16)

    def test_full_hash_includes_seed(self):
        assert full_config_hash(DEFAULT_CONFIG) != full_config_hash(
            replace(DEFAULT_CONFIG, seed=7)
        )

    def test_search_hash_ignores_seed_and_description(self):
        cfg = replace(DEFAULT_CONFIG, seed=7, description="other run")
        assert search_config_hash(cfg) == search_config_hash(DEFAULT_CONFIG)

    def test_search_hash_tracks_search_params(self):
        cfg = replace(DEFAULT_CONFIG, search=SearchConfig(greedy_hub="largest"))
        assert search_config_hash(cfg) != search_config_hash(DEFAULT_CONFIG)

    def test_search_section_hashes_alone(self):
        assert config_hash(DEFAULT_CONFIG.search) == search_config_hash(DEFAULT_CONFIG)


class TestBlockRequestHash:
    """One fingerprint per blocked pair and search settings."""

    def test_pair_is_unordered(self):
        assert block_request_hash(DEFAULT_CONFIG, 1, 2) == block_request_hash(
            DEFAULT_CONFIG, 2, 1
        )

    def test_different_pairs_differ(self):
        assert block_request_hash(DEFAULT_CONFIG, 1, 2) != block_request_hash(
            DEFAULT_CONFIG, 1, 3
        )

    def test_ignores_seed_and_tags(self):
        cfg = replace(DEFAULT_CONFIG, seed=7, tags=("rerun",))
        assert block_request_hash(cfg, 1, 2) == block_request_hash(
            DEFAULT_CONFIG, 1, 2
        )

    def test_tracks_new_edge_weight(self):
        cfg = replace(DEFAULT_CONFIG, search=SearchConfig(new_edge_weight=5))
        assert block_request_hash(cfg, 1, 2) != block_request_hash(
            DEFAULT_CONFIG, 1, 2
        )
