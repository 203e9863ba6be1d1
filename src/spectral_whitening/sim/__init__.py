"""Simulation generators."""

from spectral_whitening.sim.noise import generate_colored_noise, simulate_noise_records

__all__ = ["generate_colored_noise", "simulate_noise_records"]
