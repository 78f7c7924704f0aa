"""PairForge web backend."""
