"""Unit tests for analysis.smoothing."""

from __future__ import annotations

import numpy as np
import pytest

from spectral_whitening.analysis.smoothing import SmootherOptions, sliding_mean

RAMP = np.array([1.0, 2.0, 3.0, 4.0, 5.0])


@pytest.mark.parametrize(
    ("edge", "expected"),
    [
        ("truncate", [1.5, 2.0, 3.0, 4.0, 4.5]),
        ("pad", [1.0, 2.0, 3.0, 4.0, 3.0]),
        ("nearest", [4.0 / 3.0, 2.0, 3.0, 4.0, 14.0 / 3.0]),
        ("reflect", [4.0 / 3.0, 2.0, 3.0, 4.0, 14.0 / 3.0]),
        ("wrap", [8.0 / 3.0, 2.0, 3.0, 4.0, 10.0 / 3.0]),
    ],
)
def test_sliding_mean_edge_policies(edge: str, expected: list[float]) -> None:
    assert np.allclose(sliding_mean(RAMP, 1, edge=edge), expected)  # type: ignore[arg-type]


def test_reflect_and_nearest_differ_beyond_the_first_sample() -> None:
    reflect = sliding_mean(RAMP, 2, edge="reflect")
    nearest = sliding_mean(RAMP, 2, edge="nearest")
    assert np.allclose(reflect, [9.0 / 5.0, 11.0 / 5.0, 3.0, 19.0 / 5.0, 21.0 / 5.0])
    assert np.allclose(nearest, [8.0 / 5.0, 11.0 / 5.0, 3.0, 19.0 / 5.0, 22.0 / 5.0])
    assert not np.allclose(reflect, nearest)


def test_sliding_mean_pad_value() -> None:
    smoothed = sliding_mean(RAMP, 1, edge="pad", pad_value=3.0)
    assert np.allclose(smoothed, [2.0, 2.0, 3.0, 4.0, 4.0])


@pytest.mark.parametrize("edge", ["truncate", "pad", "nearest", "reflect", "wrap"])
def test_sliding_mean_preserves_length(edge: str) -> None:
    rng = np.random.default_rng(seed=4)
    values = rng.random(37)
    assert sliding_mean(values, 5, edge=edge).shape == values.shape  # type: ignore[arg-type]


@pytest.mark.parametrize("edge", ["truncate", "nearest", "reflect", "wrap"])
def test_sliding_mean_leaves_constant_series_unchanged(edge: str) -> None:
    values = np.full(20, 2.5)
    assert np.allclose(sliding_mean(values, 3, edge=edge), 2.5)  # type: ignore[arg-type]


def test_sliding_mean_zero_half_width_returns_copy() -> None:
    smoothed = sliding_mean(RAMP, 0)
    assert np.array_equal(smoothed, RAMP)
    assert smoothed is not RAMP


def test_truncate_window_wider_than_series_averages_everything() -> None:
    assert np.allclose(sliding_mean([1.0, 2.0, 3.0], 10), 2.0)


def test_truncate_keeps_zero_windows_exactly_zero() -> None:
    values = np.array([1e6, 3.3e5, 0.0, 0.0, 0.0, 0.0, 0.0, 7.1e4])
    smoothed = sliding_mean(values, 1)
    assert smoothed[3] == 0.0
    assert smoothed[4] == 0.0


@pytest.mark.parametrize("half_width", [100, 499, 1000])
def test_truncate_matches_shrinking_window_means_for_wide_windows(half_width: int) -> None:
    rng = np.random.default_rng(seed=21)
    values = rng.normal(size=500)
    expected = np.array(
        [np.mean(values[max(0, i - half_width):i + half_width + 1]) for i in range(values.size)]
    )
    assert np.allclose(sliding_mean(values, half_width), expected)


def test_sliding_mean_is_deterministic() -> None:
    rng = np.random.default_rng(seed=8)
    values = rng.random(64)
    assert np.array_equal(sliding_mean(values, 4), sliding_mean(values, 4))


def test_sliding_mean_rejects_negative_half_width() -> None:
    with pytest.raises(ValueError, match="non-negative integer"):
        sliding_mean(RAMP, -1)


def test_sliding_mean_rejects_unknown_edge() -> None:
    with pytest.raises(ValueError, match="Unsupported edge mode"):
        sliding_mean(RAMP, 1, edge="mirror")  # type: ignore[arg-type]


def test_smoother_options_from_mapping() -> None:
    assert SmootherOptions.from_mapping(None) == SmootherOptions()
    options = SmootherOptions.from_mapping({"edge": "NEAREST"})
    assert options.edge == "nearest"
    with pytest.raises(ValueError, match="Unknown smoother option"):
        SmootherOptions.from_mapping({"position": "center"})
